import datetime as dt

from sqlalchemy import Date, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.database import Base


class Diary(Base):
    __tablename__ = "diary"

    # 자동 증가 PK (재사용 X)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # 같은 날짜에 여러 일기 가능 → 유니크 X
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    # 작성 시점의 DateWeather 값을 복사해서 저장 (FK 아님)
    weather: Mapped[str] = mapped_column(String(50), nullable=False)
    icon: Mapped[str] = mapped_column(String(50), nullable=False)
    temperature: Mapped[float] = mapped_column(Float, nullable=False)

    text: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        Index("idx_diary_date", "date"),
    )
