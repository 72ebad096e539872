# quiz/store.py

from __future__ import annotations

import copy
import logging
import os
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from models import QuizRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = os.getenv("QUIZ_STORAGE_KEY", "wizard-web-quiz")
PASSING_SCORE = int(os.getenv("QUIZ_PASSING_SCORE", "80"))


class QuizAnswer(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question_id: int
    # stored as typed; normalisation only happens when grading
    user_answer: str
    is_correct: bool


class SessionState(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    answers: List[QuizAnswer] = Field(default_factory=list)
    current_question: int = 0
    is_completed: bool = False
    score: int = 0


class SessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


def compute_score(answers: List[QuizAnswer]) -> int:
    """
    Percentage of correct answers, rounded half up. No answers scores 0.
    """
    total = len(answers)
    if total == 0:
        return 0
    correct = sum(1 for a in answers if a.is_correct)
    # integer form of floor(100 * correct / total + 0.5)
    return (200 * correct + total) // (2 * total)


# --- Storage port -----------------------------------------------------------------


class SessionStorage(Protocol):
    def read(self, key: str) -> Optional[Dict[str, Any]]: ...

    def write(self, key: str, value: Dict[str, Any]) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(initial) if initial else {}

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        v = self._data.get(key)
        return copy.deepcopy(v) if v is not None else None

    def write(self, key: str, value: Dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)


class SqlStorage:
    """Key-value rows in the quiz_state table, one row per session key."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def read(self, key: str) -> Optional[Dict[str, Any]]:
        with self._session_factory() as db:
            rec = db.get(QuizRecord, key)
            return dict(rec.value) if rec is not None else None

    def write(self, key: str, value: Dict[str, Any]) -> None:
        with self._session_factory() as db:
            rec = db.get(QuizRecord, key)
            if rec is None:
                db.add(QuizRecord(key=key, value=value))
            else:
                rec.value = value
            db.commit()


# --- Session store ----------------------------------------------------------------


class QuizSessionStore:
    """
    The single quiz session: answers, cursor, completion and score.

    State is read from storage once on construction and the whole record is
    written back after every mutation. The store does not know the question
    bank; callers validate question ids and decide when to finalize.
    """

    def __init__(self, storage: SessionStorage, key: str = STORAGE_KEY):
        self._storage = storage
        self.key = key
        self._state = self._load()

    def _load(self) -> SessionState:
        raw = self._storage.read(self.key)
        if raw is None:
            return SessionState()
        try:
            return SessionState.model_validate(raw)
        except ValidationError as e:
            logger.warning("discarding unreadable quiz record %r: %s", self.key, e.errors()[0])
            return SessionState()

    def _persist(self) -> None:
        self._storage.write(self.key, self._state.model_dump(by_alias=True))

    # --- reads ---

    @property
    def state(self) -> SessionState:
        return self._state.model_copy(deep=True)

    @property
    def answers(self) -> List[QuizAnswer]:
        return [a.model_copy() for a in self._state.answers]

    @property
    def current_question(self) -> int:
        return self._state.current_question

    @property
    def is_completed(self) -> bool:
        return self._state.is_completed

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def status(self) -> SessionStatus:
        if self._state.is_completed:
            return SessionStatus.COMPLETED
        if not self._state.answers and self._state.current_question == 0:
            return SessionStatus.NOT_STARTED
        return SessionStatus.IN_PROGRESS

    @property
    def passed(self) -> bool:
        return self._state.is_completed and self._state.score >= PASSING_SCORE

    def answer_for(self, question_id: int) -> Optional[QuizAnswer]:
        a = next((a for a in self._state.answers if a.question_id == question_id), None)
        return a.model_copy() if a is not None else None

    def current_score(self) -> int:
        return compute_score(self._state.answers)

    # --- mutations ---

    def record_answer(self, question_id: int, raw_answer: str, is_correct: bool) -> None:
        new = QuizAnswer(question_id=question_id, user_answer=raw_answer, is_correct=is_correct)
        answers = self._state.answers
        idx = next((i for i, a in enumerate(answers) if a.question_id == question_id), None)
        if idx is None:
            answers.append(new)
        else:
            answers[idx] = new
        logger.debug("answer recorded: question=%s correct=%s", question_id, is_correct)
        self._persist()

    def advance(self) -> None:
        self._state.current_question += 1
        logger.debug("cursor moved to %d", self._state.current_question)
        self._persist()

    def finalize(self) -> None:
        self._state.score = compute_score(self._state.answers)
        self._state.is_completed = True
        logger.info(
            "quiz completed: score=%d answered=%d", self._state.score, len(self._state.answers)
        )
        self._persist()

    def reset(self) -> None:
        self._state = SessionState()
        logger.info("quiz reset")
        self._persist()
