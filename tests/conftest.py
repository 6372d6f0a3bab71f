# tests/conftest.py
import pytest
from sqlalchemy.orm import sessionmaker

from apollo.database import models  # noqa: F401 (테이블 메타데이터 등록)
from apollo.database.database import Base, build_engine

# ===================================================================
#  인메모리 SQLite 기반 Fixture
# ===================================================================

@pytest.fixture
def engine():
    """테스트마다 새 인메모리 DB를 만들고 테이블을 생성합니다."""
    test_engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()
