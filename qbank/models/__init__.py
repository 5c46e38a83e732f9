from .question import (
    OPTION_IDS,
    UNKNOWN,
    QuestionFormat,
    QuestionMetadata,
    QuestionContent,
    QuestionOption,
    QuestionSolution,
    QuestionRecord,
    ResolvedAnswer,
    option_id_for,
    build_question_id,
)
from .scrape_config import ScrapeConfig, UrlStyle, TieBreak

__all__ = [
    "OPTION_IDS",
    "UNKNOWN",
    "QuestionFormat",
    "QuestionMetadata",
    "QuestionContent",
    "QuestionOption",
    "QuestionSolution",
    "QuestionRecord",
    "ResolvedAnswer",
    "option_id_for",
    "build_question_id",
    "ScrapeConfig",
    "UrlStyle",
    "TieBreak",
]
