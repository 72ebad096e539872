# quiz/tests/test_questions.py
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_list_questions_hides_answers():
    r = client.get("/questions")
    assert r.status_code == 200
    data = r.json()
    assert len(data) == 12
    q = data[0]
    assert {"id", "question", "type", "options", "topic"} == set(q.keys())
    assert "correctAnswer" not in q and "explanation" not in q


def test_list_questions_by_topic():
    r = client.get("/questions", params={"topic": "React"})
    ids = [q["id"] for q in r.json()]
    assert ids == [4, 6, 8]


def test_list_questions_limit():
    r = client.get("/questions", params={"limit": 2})
    assert [q["id"] for q in r.json()] == [1, 2]


def test_get_question_detail_ok():
    r = client.get("/questions/6")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 6
    assert body["type"] == "text"
    assert body["options"] is None


def test_get_question_detail_404():
    r = client.get("/questions/999")
    assert r.status_code == 404


def test_get_question_at_index():
    r = client.get("/questions/at/0")
    assert r.status_code == 200
    assert r.json()["id"] == 1


def test_get_question_at_out_of_range():
    assert client.get("/questions/at/12").status_code == 404
    assert client.get("/questions/at/-1").status_code == 404


def test_topics_in_bank_order():
    r = client.get("/topics")
    assert r.json() == ["TypeScript", "CSS", "React", "Zustand", "Next.js"]
