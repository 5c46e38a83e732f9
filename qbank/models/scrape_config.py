from typing import Optional
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class UrlStyle(str, Enum):
    CONCAT = "concat"   # {base}{n}
    PATH = "path"       # {base}/{n}


class TieBreak(str, Enum):
    FIRST_MATCH = "first_match"
    LAST_MATCH = "last_match"


class ScrapeConfig(BaseModel):
    """
    Everything one scraper run needs.

    `output_path` defaults to `<year>-<exam_session>-<subject>.json` in the
    current directory when not supplied.
    """

    base_url:        str
    total_questions: int = Field(ge=0)
    subject:         str
    year:            int
    exam_session:    str
    output_path:     Optional[Path] = None

    exam_type:   str = "UPSC_CDS"
    variant:     str = "examsnet"
    url_style:   UrlStyle = UrlStyle.CONCAT
    tie_break:   TieBreak = TieBreak.LAST_MATCH
    concurrency: int = Field(1, ge=1)  # >1 runs a thread pool, one requests.Session per worker
    retries:     int = Field(0, ge=0)
    start_index: int = Field(1, ge=1)

    @model_validator(mode="after")
    def _default_output_path(self):
        if self.output_path is None:
            self.output_path = Path(f"{self.year}-{self.exam_session}-{self.subject}.json")
        return self

    @property
    def indices(self) -> range:
        return range(self.start_index, self.start_index + self.total_questions)

    @staticmethod
    def subject_output_path(subject: str) -> Path:
        return Path(subject) / f"{subject}.json"
