import datetime as dt

from sqlalchemy import Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from src.db.database import Base


class DateWeather(Base):
    __tablename__ = "date_weather"

    # 날짜당 날씨 1개 (캐시 키)
    date: Mapped[dt.date] = mapped_column(Date, primary_key=True)

    weather: Mapped[str] = mapped_column(String(50), nullable=False)
    icon: Mapped[str] = mapped_column(String(50), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"DateWeather(date={self.date}, weather={self.weather!r}, icon={self.icon!r}, temperature={self.temperature})"
