# src/main.py
import logging
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.config.settings import settings
from src.db.database import engine, Base
from src.errors import DiaryError
from src.routers import diary
from src.services.weather_refresh import run_weather_refresh

# create_all이 테이블을 인식하도록 모델 import
import src.models  # noqa: F401

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)  # diary / date_weather 테이블 생성 (없을 때만)


def build_scheduler() -> AsyncIOScheduler:
    """매일 refresh_hour:refresh_minute (기본 01:00 KST) 에 오늘 날씨 저장"""
    scheduler = AsyncIOScheduler(timezone=ZoneInfo(settings.scheduler_timezone))
    scheduler.add_job(
        run_weather_refresh,
        CronTrigger(hour=settings.refresh_hour, minute=settings.refresh_minute),
        id="weather_refresh",
        replace_existing=True,
    )
    return scheduler


@asynccontextmanager
async def lifespan(app: FastAPI):
    scheduler = None
    if settings.scheduler_enabled:
        scheduler = build_scheduler()
        scheduler.start()
        logger.info("스케줄러 시작됨")

    try:
        yield
    finally:
        if scheduler:
            scheduler.shutdown(wait=False)
            logger.info("스케줄러 종료됨")


app = FastAPI(lifespan=lifespan)

app.include_router(diary.router)


# ---------- 에러 처리 ----------
@app.exception_handler(DiaryError)
async def handle_diary_error(request: Request, exc: DiaryError):
    logger.warning(f"{request.method} {request.url.path} 실패: {exc.message}")
    return PlainTextResponse(exc.message, status_code=400)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} 잘못된 요청: {exc.errors()}")
    return PlainTextResponse("요청 파라미터가 올바르지 않습니다.", status_code=400)


@app.exception_handler(Exception)
async def handle_exception(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} 처리 중 예상치 못한 오류")
    return PlainTextResponse("서버 오류가 발생했습니다.", status_code=500)


# 확인용 엔드포인트
@app.get("/")
async def root():
    return {
        "message": "날씨 일기 API가 정상 작동 중입니다",
        "version": "1.0.0"
    }
