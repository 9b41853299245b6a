# src/routers/diary.py
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from src.config.settings import settings
from src.db.database import get_db
from src.schemas.schema_diary import DiaryItem
from src.services.diary import (
    create_diary,
    read_diary,
    read_diaries,
    update_diary,
    delete_diary,
)
from src.services.weather import OpenWeatherClient

router = APIRouter(tags=["일기"])


# 요청마다 날씨 클라이언트 생성 → 요청 끝나면 닫음
def get_weather_provider():
    with OpenWeatherClient(settings.weather_config()) as provider:
        yield provider


# ---------- 작성 ----------
@router.post("/create/diary", status_code=status.HTTP_201_CREATED)
def create(
    target_date: date = Query(..., alias="date", description="YYYY-MM-DD"),
    text: str = Query(...),
    db: Session = Depends(get_db),
    provider=Depends(get_weather_provider),
):
    """
    POST /create/diary?date=2025-11-18&text=...
    - 해당 날짜 날씨(캐시 또는 API)를 붙여서 일기 저장
    - 같은 날짜에 여러 번 작성 가능
    """
    create_diary(db, provider, target_date, text)


# ---------- 조회 ----------
@router.get("/read/diary", response_model=List[DiaryItem])
def read(
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    return read_diary(db, target_date)


@router.get("/read/diaries", response_model=List[DiaryItem])
def read_range(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    db: Session = Depends(get_db),
):
    """
    GET /read/diaries?startDate=2025-11-01&endDate=2025-11-30
    - 시작일/종료일 포함
    - startDate > endDate 이면 400
    """
    return read_diaries(db, start_date, end_date)


# ---------- 수정 ----------
@router.put("/update/diary")
def update(
    target_date: date = Query(..., alias="date"),
    text: str = Query(...),
    db: Session = Depends(get_db),
):
    """해당 날짜 첫 번째 일기의 내용만 수정 (없으면 400)"""
    update_diary(db, target_date, text)


# ---------- 삭제 ----------
@router.delete("/delete/diary")
def delete(
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    delete_diary(db, target_date)
