from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from bank import QuestionBank, QuestionModel
from deps.quiz import get_question_bank, get_session_store
from matching import is_correct, validate_answer
from schemas.questions import QuestionOut
from schemas.quiz import (
    AnswerRequest,
    AnswerResponse,
    CurrentQuestionOut,
    NextResponse,
    RevealOut,
    SessionOut,
    SummaryOut,
    TopicBreakdown,
)
from store import PASSING_SCORE, QuizAnswer, QuizSessionStore, SessionStatus

router = APIRouter(prefix="/quiz", tags=["quiz"])


def _session_out(store: QuizSessionStore, bank: QuestionBank) -> SessionOut:
    st = store.state
    return SessionOut(
        answers=st.answers,
        current_question=st.current_question,
        is_completed=st.is_completed,
        score=st.score,
        current_score=store.current_score(),
        status=store.status,
        total=bank.length(),
    )


def _reveal(q: QuestionModel, a: Optional[QuizAnswer]) -> Optional[RevealOut]:
    if a is None:
        return None
    return RevealOut(
        correct=a.is_correct,
        explanation=q.explanation,
        correct_answer=None if a.is_correct else q.correct_answer,
    )


@router.get("", response_model=SessionOut)
def get_session(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    return _session_out(store, bank)


@router.get("/current", response_model=CurrentQuestionOut)
def current_question(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    total = bank.length()
    idx = store.current_question
    progress = ((idx + 1) / total) * 100 if total else 0.0
    out = CurrentQuestionOut(
        index=idx,
        total=total,
        progress_percentage=min(progress, 100.0),
        completed=store.is_completed,
    )
    if store.is_completed:
        return out

    q = bank.get(idx)
    if q is None:
        # cursor ran past the end without a finalize; the client shows an empty state
        return out

    a = store.answer_for(q.id)
    out.question = QuestionOut.model_validate(q)
    out.answer = a
    out.reveal = _reveal(q, a)
    return out


@router.post("/answer", response_model=AnswerResponse)
def submit_answer(
    req: AnswerRequest,
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    q = bank.by_id(req.question_id)
    if q is None:
        raise HTTPException(status_code=404, detail="question not found")
    if store.is_completed:
        raise HTTPException(status_code=409, detail="quiz already completed; reset to retake")

    msg = validate_answer(q, req.answer)
    if msg:
        return AnswerResponse(ok=False, correct=False, feedback=msg)

    correct = is_correct(q, req.answer)
    store.record_answer(q.id, req.answer, correct)
    return AnswerResponse(ok=True, correct=correct, reveal=_reveal(q, store.answer_for(q.id)))


@router.post("/next", response_model=NextResponse)
def next_question(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    if store.is_completed:
        return NextResponse(ok=True, session=_session_out(store, bank))

    total = bank.length()
    q = bank.get(store.current_question)
    if q is not None and store.answer_for(q.id) is None:
        return NextResponse(
            ok=False,
            feedback="Answer the current question first.",
            session=_session_out(store, bank),
        )

    if store.current_question < total - 1:
        store.advance()
    else:
        store.finalize()
    return NextResponse(ok=True, session=_session_out(store, bank))


@router.post("/complete", response_model=SessionOut)
def complete_quiz(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    store.finalize()
    return _session_out(store, bank)


@router.post("/reset", response_model=SessionOut)
def reset_quiz(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    store.reset()
    return _session_out(store, bank)


@router.get("/summary", response_model=SummaryOut)
def quiz_summary(
    store: QuizSessionStore = Depends(get_session_store),
    bank: QuestionBank = Depends(get_question_bank),
):
    questions = bank.all()
    answers = {a.question_id: a for a in store.answers}
    total = len(questions)

    breakdown = []
    for topic in bank.topics():
        in_topic = [q for q in questions if q.topic == topic]
        given = [answers[q.id] for q in in_topic if q.id in answers]
        breakdown.append(
            TopicBreakdown(
                topic=topic,
                total=len(in_topic),
                answered=len(given),
                correct=sum(1 for a in given if a.is_correct),
            )
        )

    completed = store.status == SessionStatus.COMPLETED
    return SummaryOut(
        total_questions=total,
        answered=len(answers),
        progress_percentage=(len(answers) / total) * 100 if total else 0.0,
        status=store.status,
        score=store.score if completed else None,
        passed=store.passed if completed else None,
        passing_score=PASSING_SCORE,
        topics=breakdown,
    )
