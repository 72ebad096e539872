# quiz/schemas/questions.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class QuestionOut(BaseModel):
    # public view: no correct answer or explanation before the user answers
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
    id: int
    question: str
    type: str
    options: Optional[List[str]] = None
    topic: str
