from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from bank import QuestionBank
from deps.quiz import get_question_bank
from schemas.questions import QuestionOut

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[QuestionOut])
def list_questions(
    topic: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    bank: QuestionBank = Depends(get_question_bank),
):
    qs = bank.all()

    if topic:
        qs = [q for q in qs if q.topic == topic]

    if limit is not None:
        qs = qs[:limit]

    return [QuestionOut.model_validate(q) for q in qs]


@router.get("/questions/at/{index}", response_model=QuestionOut)
def get_question_at(index: int, bank: QuestionBank = Depends(get_question_bank)):
    q = bank.get(index)
    if q is None:
        raise HTTPException(status_code=404, detail="question not found")
    return QuestionOut.model_validate(q)


@router.get("/questions/{qid}", response_model=QuestionOut)
def get_question_detail(qid: int, bank: QuestionBank = Depends(get_question_bank)):
    q = bank.by_id(qid)
    if q is None:
        raise HTTPException(status_code=404, detail="question not found")
    return QuestionOut.model_validate(q)


@router.get("/topics", response_model=List[str])
def list_topics(bank: QuestionBank = Depends(get_question_bank)):
    return bank.topics()
