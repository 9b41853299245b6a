# src/services/weather_refresh.py
# 매일 정해진 시각에 오늘 날씨를 미리 저장 (일기 작성 시 API 호출 없이 캐시 사용)
import datetime as dt
import logging
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from src.config.settings import settings
from src.db.database import SessionLocal
from src.models.date_weather import DateWeather
from src.services.diary import WeatherProvider, resolve_weather
from src.services.weather import OpenWeatherClient

logger = logging.getLogger(__name__)


def today_in_zone(tz_name: str = settings.scheduler_timezone) -> dt.date:
    return dt.datetime.now(ZoneInfo(tz_name)).date()


def save_today_weather(db: Session, provider: WeatherProvider, today: dt.date | None = None) -> DateWeather:
    """
    오늘 날씨를 캐시에 저장.
    이미 일기 작성 중에 저장된 값이 있으면 덮어쓰지 않고 그대로 둠 (날짜당 1개 유지).
    """
    today = today or today_in_zone()
    try:
        snapshot = resolve_weather(db, provider, today)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return snapshot


def run_weather_refresh(session_factory=SessionLocal, provider_factory=None) -> bool:
    """
    스케줄러용 래퍼: 세션/클라이언트를 직접 열고 닫음.
    실패해도 예외를 올리지 않음 (스케줄러 잡이 죽지 않도록) → 로그만 남기고 False
    """
    if provider_factory is None:
        provider_factory = lambda: OpenWeatherClient(settings.weather_config())

    db = session_factory()
    try:
        with provider_factory() as provider:
            snapshot = save_today_weather(db, provider)
        logger.info(f"[스케줄러] 오늘 날씨 저장 완료: {snapshot.date} {snapshot.weather}")
        return True
    except Exception as e:
        logger.exception(f"[스케줄러 오류][weather_refresh] {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    run_weather_refresh()
