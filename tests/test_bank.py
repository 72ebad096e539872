import json

import pytest
from pydantic import ValidationError

from bank import QuestionBank, QuestionModel


def _q(**over):
    base = {
        "id": 1,
        "question": "Pick A",
        "type": "multiple-choice",
        "options": ["A", "B"],
        "correctAnswer": "A",
        "explanation": "A is right.",
        "topic": "CSS",
    }
    base.update(over)
    return base


def test_builtin_bank_when_no_data_dir(tmp_path):
    bank = QuestionBank(tmp_path / "missing")
    assert bank.length() == 12
    assert bank.get(0).id == 1
    assert bank.get(11).id == 12
    assert bank.get(12) is None
    assert bank.get(-1) is None


def test_by_id_and_topics(tmp_path):
    bank = QuestionBank(tmp_path / "missing")
    assert bank.by_id(6).correct_answer == "JavaScript XML"
    assert bank.by_id(404) is None
    assert bank.topics() == ["TypeScript", "CSS", "React", "Zustand", "Next.js"]


def test_loads_json_and_jsonl_in_sorted_order(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps([_q(id=1), _q(id=2, type="text", options=None)]))
    (tmp_path / "b.jsonl").write_text(
        "# comment\n" + json.dumps(_q(id=3, type="code", options=None)) + "\n{not json\n"
    )
    (tmp_path / "notes.txt").write_text("ignored")

    bank = QuestionBank(tmp_path)
    assert bank.length() == 3
    assert [bank.get(i).id for i in range(3)] == [1, 2, 3]


def test_invalid_and_duplicate_records_are_skipped(tmp_path):
    rows = [
        _q(id=1),
        _q(id=1, question="duplicate"),
        _q(id=2, correctAnswer="C"),  # answer not among options
        _q(id=3, options=[]),
        _q(id=0),
        _q(id=4, type="essay"),
        "not an object",
        _q(id=5, type="text", options=None),
    ]
    (tmp_path / "bank.json").write_text(json.dumps(rows))

    bank = QuestionBank(tmp_path)
    assert [q.id for q in bank.all()] == [1, 5]
    assert bank.by_id(1).question == "Pick A"


def test_falls_back_when_nothing_valid(tmp_path):
    (tmp_path / "bank.json").write_text(json.dumps({"not": "a list"}))
    assert QuestionBank(tmp_path).length() == 12


def test_reload_picks_up_new_files(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps([_q(id=1)]))
    bank = QuestionBank(tmp_path)
    assert bank.length() == 1

    (tmp_path / "b.json").write_text(json.dumps([_q(id=2)]))
    assert bank.reload() == 2


def test_question_model_rejects_options_on_text():
    with pytest.raises(ValidationError):
        QuestionModel.model_validate(_q(type="text"))


def test_question_model_is_immutable():
    q = QuestionModel.model_validate(_q())
    with pytest.raises(ValidationError):
        q.correct_answer = "B"
