from __future__ import annotations

from typing import Optional

from bank import QuestionModel

LEN_LIMIT = 2000
_REQUIRED_MSG = "Answer required."
_TOO_LONG_MSG = f"Answer too long (> {LEN_LIMIT})."
_NOT_AN_OPTION_MSG = "Answer must be one of the listed options."


def normalize(s: str) -> str:
    return s.strip().lower()


def validate_answer(q: QuestionModel, answer: str) -> Optional[str]:
    """
    Return a feedback message when the raw answer can't be graded, else None.
    Multiple-choice answers must match one of the options (case/whitespace-insensitive).
    """
    if answer is None or not isinstance(answer, str) or not answer.strip():
        return _REQUIRED_MSG
    if len(answer) > LEN_LIMIT:
        return _TOO_LONG_MSG
    if q.type == "multiple-choice":
        allowed = {normalize(o) for o in q.options or []}
        if normalize(answer) not in allowed:
            return _NOT_AN_OPTION_MSG
    return None


def is_correct(q: QuestionModel, answer: str) -> bool:
    return normalize(answer) == normalize(q.correct_answer)
