# quiz/bank.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from questions import QUESTIONS

logger = logging.getLogger(__name__)

_BASE = Path(__file__).resolve().parent
_DATA_DIR = Path(os.getenv("QUESTION_BANK_DIR", str(_BASE / "data" / "questions")))

QuestionType = Literal["multiple-choice", "text", "code"]


class QuestionModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    question: str
    type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: str
    explanation: str
    topic: str

    @model_validator(mode="after")
    def _check_options(self) -> "QuestionModel":
        if self.id < 1:
            raise ValueError("id must be a positive integer")
        if self.type == "multiple-choice":
            if not self.options:
                raise ValueError("multiple-choice question needs a non-empty options list")
            if self.correct_answer not in self.options:
                raise ValueError("correctAnswer must be one of the options")
        elif self.options is not None:
            raise ValueError(f"{self.type} question must not carry options")
        return self


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("skipping malformed row %s:%d", p.name, idx)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("skipping unreadable question file %s", p.name)
            data = []
    if isinstance(data, list):
        for obj in data:
            yield obj


class QuestionBank:
    """Ordered, read-only list of quiz questions.

    Position in the list is the traversal order used by the quiz cursor.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else _DATA_DIR
        self._questions: List[QuestionModel] = []
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.reload()

    def _collect(self, source: Iterable[Any], questions: List[QuestionModel], seen: set) -> None:
        for raw in source:
            if not isinstance(raw, dict):
                continue
            try:
                q = QuestionModel.model_validate(raw)
            except ValidationError as e:
                logger.warning("skipping invalid question %r: %s", raw.get("id"), e.errors()[0])
                continue
            if q.id in seen:
                logger.warning("skipping duplicate question id %s", q.id)
                continue
            seen.add(q.id)
            questions.append(q)

    def reload(self) -> int:
        questions: List[QuestionModel] = []
        seen: set = set()

        if self.data_dir.exists():
            for p in sorted(self.data_dir.rglob("*")):
                if not p.is_file():
                    continue
                suf = p.suffix.lower()
                if suf == ".jsonl":
                    source = _iter_jsonl(p)
                elif suf == ".json":
                    source = _iter_json(p)
                else:
                    continue
                self._collect(source, questions, seen)

        # Fall back to the built-in bank if the data dir gave us nothing
        if not questions:
            self._collect(QUESTIONS, questions, seen)

        self._questions = questions
        self._loaded = True
        logger.info("question bank loaded: %d questions", len(questions))
        return len(questions)

    def get(self, index: int) -> Optional[QuestionModel]:
        self._ensure_loaded()
        if 0 <= index < len(self._questions):
            return self._questions[index]
        return None

    def length(self) -> int:
        self._ensure_loaded()
        return len(self._questions)

    def by_id(self, qid: int) -> Optional[QuestionModel]:
        self._ensure_loaded()
        return next((q for q in self._questions if q.id == qid), None)

    def all(self) -> List[QuestionModel]:
        self._ensure_loaded()
        return list(self._questions)

    def topics(self) -> List[str]:
        self._ensure_loaded()
        # dict keeps first-seen order
        return list(dict.fromkeys(q.topic for q in self._questions))


_bank = QuestionBank()


# Public API
def get_bank() -> QuestionBank:
    return _bank


def reload_bank() -> int:
    return _bank.reload()
