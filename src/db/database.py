# src/db/database.py
# DB 연결 설정 (운영: MySQL / 테스트: sqlite)
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from src.config.settings import settings


def build_url(s=settings):
    if s.database_url:
        return make_url(s.database_url)
    return URL.create(
        "mysql+pymysql",
        username=s.db_user,
        password=s.db_pass,
        host=s.db_host,
        port=s.db_port,
        database=s.db_name,
    )


def make_engine(url):
    url = make_url(url)
    if url.get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,     # 끊긴 커넥션 자동 감지
        pool_recycle=1800,      # 30분마다 커넥션 새로고침
        pool_size=5,
        max_overflow=10,
    )


engine = make_engine(build_url())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# 의존성 주입을 위한 데이터베이스 세션 생성기
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()  # 요청 끝나면 세션 닫음 (commit 안 된 작업은 롤백)
