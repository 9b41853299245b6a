# src/config/settings.py
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


@dataclass(frozen=True)
class WeatherConfig:
    """날씨 API 호출에 필요한 값 묶음 (OpenWeatherClient 생성 시 주입)"""
    api_key: str
    url: str = "https://api.openweathermap.org/data/2.5/weather"
    city: str = "Seoul"
    units: str = "metric"
    lang: str = "kr"
    timeout: Optional[float] = 10.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    # OpenWeatherMap
    openweathermap_key: str
    weather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    weather_city: str = "Seoul"
    weather_units: str = "metric"
    weather_lang: str = "kr"
    weather_timeout: float = 10.0

    # DB: database_url이 있으면 그대로 사용, 없으면 MySQL 접속정보로 URL 구성
    database_url: Optional[str] = None
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_name: Optional[str] = None

    # 스케줄러 (매일 refresh_hour:refresh_minute 에 오늘 날씨 저장)
    scheduler_enabled: bool = True
    scheduler_timezone: str = "Asia/Seoul"
    refresh_hour: int = 1
    refresh_minute: int = 0

    def weather_config(self) -> WeatherConfig:
        return WeatherConfig(
            api_key=self.openweathermap_key,
            url=self.weather_url,
            city=self.weather_city,
            units=self.weather_units,
            lang=self.weather_lang,
            timeout=self.weather_timeout,
        )


settings = Settings()
