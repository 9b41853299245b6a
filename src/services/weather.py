"""
OpenWeatherMap 클라이언트
현재 날씨 1회 조회 → DateWeather(저장 전) 로 변환
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

import httpx

from src.config.settings import WeatherConfig
from src.errors import ProviderError
from src.models.date_weather import DateWeather

logger = logging.getLogger(__name__)


def parse_weather(target_date: date, payload: Any) -> DateWeather:
    """
    OpenWeatherMap 응답(JSON) 파싱

    - temperature: main.temp
    - weather / icon: weather[0].main / weather[0].icon
    """
    try:
        temperature = payload["main"]["temp"]
        first = payload["weather"][0]
        weather = first["main"]
        icon = first["icon"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error(f"날씨 데이터 파싱 실패: {e!r}")
        raise ProviderError("날씨 데이터 파싱 실패") from e

    # bool은 int의 하위 타입이라 따로 걸러냄
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        raise ProviderError("날씨 데이터 파싱 실패")
    if not isinstance(weather, str) or not isinstance(icon, str):
        raise ProviderError("날씨 데이터 파싱 실패")

    return DateWeather(
        date=target_date,
        weather=weather,
        icon=icon,
        temperature=float(temperature),
    )


class OpenWeatherClient:
    """고정 도시의 '현재' 날씨를 가져오는 클라이언트"""

    def __init__(self, config: WeatherConfig, client: Optional[httpx.Client] = None):
        if not config.api_key:
            raise ValueError("OpenWeatherMap API 키가 설정되지 않았습니다.")
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=config.timeout)

    def _params(self) -> Dict[str, str]:
        return {
            "q": self.config.city,
            "appid": self.config.api_key,
            "units": self.config.units,
            "lang": self.config.lang,
        }

    def fetch(self, target_date: date) -> DateWeather:
        """
        날씨 조회

        target_date는 API로 보내지 않음. 어떤 날짜를 넣어도 API의 현재 날씨가 반환되고,
        반환값의 date만 target_date로 찍힘.
        """
        if target_date != date.today():
            logger.debug(f"{target_date} 날씨 요청 → 현재 날씨로 대체")

        try:
            r = self.client.get(self.config.url, params=self._params())
        except httpx.HTTPError as e:
            logger.error(f"날씨 API 연결 오류: {e!r}")
            raise ProviderError("날씨 API 호출에 실패했습니다.") from e

        if r.status_code >= 400:
            logger.error(f"날씨 API 응답 오류: {r.status_code}")
            raise ProviderError(f"날씨 API 호출에 실패했습니다. (status={r.status_code})")

        try:
            payload = r.json()
        except ValueError as e:
            logger.error("날씨 API 응답이 JSON이 아닙니다.")
            raise ProviderError("날씨 데이터 파싱 실패") from e

        snapshot = parse_weather(target_date, payload)
        logger.info(f"날씨 조회 성공: {snapshot.date} {snapshot.weather} {snapshot.temperature}")
        return snapshot

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
