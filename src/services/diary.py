# src/services/diary.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import InvalidRangeError, NotFoundError
from src.models.date_weather import DateWeather
from src.models.diary import Diary

logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    def fetch(self, target_date: date) -> DateWeather: ...


def get_date_weather(db: Session, target_date: date) -> DateWeather | None:
    return (
        db.execute(select(DateWeather).where(DateWeather.date == target_date))
        .scalars()
        .first()
    )


def resolve_weather(db: Session, provider: WeatherProvider, target_date: date) -> DateWeather:
    """
    날짜별 날씨: 캐시(date_weather)에 있으면 그대로, 없으면 API 호출 후 저장.

    다른 요청이 같은 날짜를 먼저 저장해서 PK 충돌이 나면 롤백하고 그 행을 다시 읽음.
    (호출 측에서 이 함수 전에 다른 쓰기를 하지 않는다는 전제)
    """
    cached = get_date_weather(db, target_date)
    if cached:
        logger.debug(f"날씨 캐시 hit: {target_date}")
        return cached

    logger.info(f"날씨 캐시 miss: {target_date} → API 호출")
    fetched = provider.fetch(target_date)
    db.add(fetched)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        winner = get_date_weather(db, target_date)
        if winner is None:
            raise
        logger.info(f"날씨 동시 저장 충돌: {target_date} → 먼저 저장된 값 사용")
        return winner
    return fetched


def create_diary(db: Session, provider: WeatherProvider, target_date: date, text: str) -> Diary:
    try:
        weather = resolve_weather(db, provider, target_date)
        row = Diary(
            date=target_date,
            weather=weather.weather,
            icon=weather.icon,
            temperature=weather.temperature,
            text=text,
        )
        db.add(row)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return row


def read_diary(db: Session, target_date: date) -> List[Diary]:
    stmt = select(Diary).where(Diary.date == target_date).order_by(Diary.id.asc())
    return db.execute(stmt).scalars().all()


def read_diaries(db: Session, start_date: date, end_date: date) -> List[Diary]:
    """start_date ~ end_date (양 끝 포함)"""
    if start_date > end_date:
        raise InvalidRangeError("시작일이 종료일보다 늦을 수 없습니다.")

    stmt = (
        select(Diary)
        .where(Diary.date >= start_date, Diary.date <= end_date)
        .order_by(Diary.date.asc(), Diary.id.asc())
    )
    return db.execute(stmt).scalars().all()


def update_diary(db: Session, target_date: date, text: str) -> Diary:
    """
    같은 날짜에 여러 개면 id가 가장 작은(먼저 쓴) 일기 하나만 수정.
    날씨 값은 건드리지 않음.
    """
    rows = read_diary(db, target_date)
    if not rows:
        raise NotFoundError("해당 날짜의 일기가 없습니다.")

    diary = rows[0]
    diary.text = text
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    return diary


def delete_diary(db: Session, target_date: date) -> int:
    """해당 날짜 일기 전부 삭제. 없어도 에러 X"""
    try:
        deleted = db.execute(delete(Diary).where(Diary.date == target_date)).rowcount
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"일기 삭제: {target_date} ({deleted}건)")
    return deleted
