"""공용 테스트 fixture (sqlite 메모리 DB + 가짜 날씨 클라이언트)"""
import os

# src.* import 전에 설정해야 settings/engine 생성 시 반영됨
os.environ.setdefault("OPENWEATHERMAP_KEY", "test-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.db.database import Base
from src.errors import ProviderError
from src.models.date_weather import DateWeather
import src.models  # noqa: F401


class FakeProvider:
    """호출 횟수를 세는 가짜 날씨 클라이언트"""

    def __init__(self, weather="Clear", icon="01d", temperature=21.5, error=None):
        self.weather = weather
        self.icon = icon
        self.temperature = temperature
        self.error = error
        self.calls = []
        self.closed = False

    def fetch(self, target_date):
        self.calls.append(target_date)
        if self.error:
            raise self.error
        return DateWeather(
            date=target_date,
            weather=self.weather,
            icon=self.icon,
            temperature=self.temperature,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=ProviderError("날씨 API 호출에 실패했습니다."))
