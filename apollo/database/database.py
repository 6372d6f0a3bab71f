import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# 데이터베이스 연결 문자열 (환경 변수가 없으면 로컬 SQLite 파일 사용)
SQLALCHEMY_DATABASE_URL = os.environ.get("APOLLO_DATABASE_URL", "sqlite:///apollo.db")


def build_engine(url: str) -> Engine:
    """
    주어진 URL로 SQLAlchemy 엔진을 생성합니다.
    SQLite인 경우 스레드 설정과 외래 키 강제를 함께 적용합니다.
    """
    if not url.startswith("sqlite"):
        return create_engine(url)

    sqlite_engine = create_engine(url, connect_args={"check_same_thread": False})

    @event.listens_for(sqlite_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(SQLALCHEMY_DATABASE_URL)

# autocommit=False, autoflush=False: 명시적으로 commit을 호출해야 DB에 반영됩니다.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
