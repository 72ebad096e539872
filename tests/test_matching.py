from bank import QuestionModel
from matching import is_correct, normalize, validate_answer

MC = QuestionModel(
    id=1,
    question="Which hook manages state?",
    type="multiple-choice",
    options=["useState", "useEffect"],
    correct_answer="useState",
    explanation="useState holds local state.",
    topic="React",
)
TEXT = QuestionModel(
    id=2,
    question="What is JSX?",
    type="text",
    correct_answer="JavaScript XML",
    explanation="JSX stands for JavaScript XML.",
    topic="React",
)


def test_normalize():
    assert normalize("  JavaScript XML \n") == "javascript xml"


def test_text_answer_case_and_whitespace_insensitive():
    assert is_correct(TEXT, "  javascript xml ")
    assert is_correct(TEXT, "JAVASCRIPT XML")
    assert not is_correct(TEXT, "JavaScript  XML")


def test_blank_answer_rejected():
    assert validate_answer(TEXT, "   ") == "Answer required."
    assert validate_answer(TEXT, "") == "Answer required."


def test_multiple_choice_must_be_an_option():
    assert validate_answer(MC, "useReducer") is not None
    assert validate_answer(MC, " usestate ") is None
    assert is_correct(MC, " usestate ")
    assert not is_correct(MC, "useEffect")


def test_free_text_accepts_anything_non_blank():
    assert validate_answer(TEXT, "no idea") is None
