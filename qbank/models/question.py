from typing import List, Union
from enum import Enum

from pydantic import BaseModel, Field


OPTION_IDS = ["A", "B", "C", "D"]
UNKNOWN = "Unknown"


class QuestionFormat(str, Enum):
    TEXT = "text"


class QuestionMetadata(BaseModel):
    question_id: str
    serial_no: str
    subject: str
    topic: str = ""
    subtopic: str = ""
    # int when supplied by the caller, the literal "Unknown" when the page has none
    year: Union[int, str]
    exam_session: str


class QuestionContent(BaseModel):
    question_text: str = ""
    question_format: QuestionFormat = QuestionFormat.TEXT
    has_image: bool = False
    image_urls: List[str] = Field(default_factory=list)
    has_equation: bool = False
    equation_data: str = ""
    language: str = "en"


class QuestionOption(BaseModel):
    id: str
    text: str = ""
    has_image: bool = False
    image_url: str = ""
    has_equation: bool = False
    equation_data: str = ""


class QuestionSolution(BaseModel):
    correct_option: str = ""
    explanation: str = ""
    explanation_format: QuestionFormat = QuestionFormat.TEXT
    has_image: bool = False
    image_urls: List[str] = Field(default_factory=list)
    has_equation: bool = False
    equation_data: str = ""


class QuestionRecord(BaseModel):
    exam_type: str
    metadata: QuestionMetadata
    content: QuestionContent
    options: List[QuestionOption] = Field(default_factory=list)
    solution: QuestionSolution = Field(default_factory=QuestionSolution)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json")


class ResolvedAnswer(BaseModel):
    correct_option: str = ""
    explanation: str = ""


def option_id_for(index: int) -> str:
    """Positional id: A-D for the first four options, the numeric index after that."""
    return OPTION_IDS[index] if index < len(OPTION_IDS) else str(index)


def build_question_id(year, exam_session: str, exam_type: str, subject: str, serial: int) -> str:
    return f"{year}_{exam_session}_{exam_type}_{subject}_{serial}"
