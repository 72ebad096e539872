from bank import QuestionBank, get_bank
from db import SessionLocal
from store import QuizSessionStore, SqlStorage


def get_question_bank() -> QuestionBank:
    return get_bank()


def get_session_store() -> QuizSessionStore:
    # fresh read of the persisted record per request
    return QuizSessionStore(SqlStorage(SessionLocal))
