import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from models import QuizRecord
from store import STORAGE_KEY, QuizSessionStore, SqlStorage


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    finally:
        engine.dispose()


def test_read_missing_key_returns_none(session_factory):
    assert SqlStorage(session_factory).read(STORAGE_KEY) is None


def test_write_then_replace(session_factory):
    storage = SqlStorage(session_factory)
    storage.write("k", {"score": 1})
    storage.write("k", {"score": 2})
    assert storage.read("k") == {"score": 2}

    with session_factory() as db:
        assert db.query(QuizRecord).count() == 1
        assert db.get(QuizRecord, "k").updated_at is not None


def test_store_round_trips_through_database(session_factory):
    store = QuizSessionStore(SqlStorage(session_factory))
    store.record_answer(1, "Static type checking", True)
    store.record_answer(2, "layout: flexbox", False)
    store.advance()
    store.advance()
    store.finalize()

    reloaded = QuizSessionStore(SqlStorage(session_factory))
    assert reloaded.current_question == 2
    assert reloaded.is_completed is True
    assert reloaded.score == 50
    assert [a.question_id for a in reloaded.answers] == [1, 2]

    reloaded.reset()
    assert QuizSessionStore(SqlStorage(session_factory)).answers == []
