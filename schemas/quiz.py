# quiz/schemas/quiz.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from schemas.questions import QuestionOut
from store import QuizAnswer, SessionStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Session ----------


class SessionOut(_CamelModel):
    answers: List[QuizAnswer]
    current_question: int
    is_completed: bool
    score: int
    current_score: int
    status: SessionStatus
    total: int


class NextResponse(_CamelModel):
    ok: bool
    feedback: Optional[str] = None
    session: SessionOut


# ---------- Current question ----------


class RevealOut(_CamelModel):
    correct: bool
    explanation: str
    # only filled in when the answer was wrong
    correct_answer: Optional[str] = None


class CurrentQuestionOut(_CamelModel):
    index: int
    total: int
    progress_percentage: float
    completed: bool
    question: Optional[QuestionOut] = None
    answer: Optional[QuizAnswer] = None
    reveal: Optional[RevealOut] = None


# ---------- Submit answer ----------


class AnswerRequest(_CamelModel):
    question_id: int
    answer: str


class AnswerResponse(_CamelModel):
    ok: bool
    correct: bool
    feedback: Optional[str] = None
    reveal: Optional[RevealOut] = None


# ---------- Summary ----------


class TopicBreakdown(_CamelModel):
    topic: str
    total: int
    answered: int
    correct: int


class SummaryOut(_CamelModel):
    total_questions: int
    answered: int
    progress_percentage: float
    status: SessionStatus
    score: Optional[int] = None
    passed: Optional[bool] = None
    passing_score: int
    topics: List[TopicBreakdown]
