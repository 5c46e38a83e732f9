"""
Common interface for per-site question extractors.

Each supported page layout gets one implementation; the scraper picks the
implementation by name from `ScrapeConfig.variant`.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from bs4 import BeautifulSoup

from qbank.models import QuestionOption


class QuestionExtractor(ABC):
    name: str = ""

    @abstractmethod
    def extract_text(self, soup: BeautifulSoup) -> str:
        """Question text, or "" when nothing could be found."""

    @abstractmethod
    def extract_options(self, soup: BeautifulSoup) -> List[QuestionOption]:
        """Answer options in page order with positional ids."""

    def extract_images(self, soup: BeautifulSoup) -> List[str]:
        return []

    def extract_metadata(self, soup: BeautifulSoup) -> Dict[str, str]:
        """Page-level `year` / `exam_session`; empty when the layout carries none."""
        return {}
