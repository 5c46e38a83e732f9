"""
Extractor utilities for scraping questions from different page layouts.
Each layout has its own extraction logic based on its HTML structure.
"""

from typing import Dict, Type

from .base import QuestionExtractor
from .examsnet_extractor import ExamsnetExtractor, ExamsnetImageExtractor

EXTRACTORS: Dict[str, Type[QuestionExtractor]] = {
    ExamsnetExtractor.name: ExamsnetExtractor,
    ExamsnetImageExtractor.name: ExamsnetImageExtractor,
}


def get_extractor(variant: str) -> QuestionExtractor:
    try:
        return EXTRACTORS[variant]()
    except KeyError:
        raise ValueError(
            f"Unknown extractor variant '{variant}'. Choose from: {', '.join(sorted(EXTRACTORS))}"
        ) from None


__all__ = [
    "QuestionExtractor",
    "ExamsnetExtractor",
    "ExamsnetImageExtractor",
    "EXTRACTORS",
    "get_extractor",
]
