import os
import tempfile

# keep the app's default engine away from the working directory
_TMP = tempfile.mkdtemp(prefix="quiz-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP}/quiz.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from deps.quiz import get_session_store  # noqa: E402
from main import app  # noqa: E402
from store import MemoryStorage, QuizSessionStore  # noqa: E402


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return QuizSessionStore(storage)


@pytest.fixture
def client(storage):
    # each request re-reads the shared in-memory record, like the SQL-backed default
    app.dependency_overrides[get_session_store] = lambda: QuizSessionStore(storage)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
