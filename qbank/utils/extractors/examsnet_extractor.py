"""
Examsnet question page extractors.

Question pages look like:

<div class="question-text">Which of the following ...?</div>
<ul>
  <li class="list-group-item"><label><input/> <span>Option one</span></label></li>
  ...
</ul>
<script type="application/ld+json">{"@type": "QAPage", ...}</script>

The image variant (previous-year papers) additionally carries class based
image placeholders (<span class="qimg qimg-8f3a1c"></span>) and a
"[2019 CDS-II]" tag next to the question text.
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from qbank import settings
from qbank.models import QuestionOption, UNKNOWN, option_id_for

from .base import QuestionExtractor

logger = logging.getLogger("scrape")

QUESTION_TEXT_SELECTOR = ".question-text"
FALLBACK_TEXT_SELECTOR = "article"
OPTION_SELECTOR = "li.list-group-item label span"
IMAGE_MARKER_SELECTOR = '[class*="qimg-"]'

IMAGE_TOKEN_RE = re.compile(r"\bqimg-([\w-]+)")
PAPER_TAG_RE = re.compile(r"\[(\d{4})\s*CDS-(II|I)\]")


def _joined_text(soup: BeautifulSoup, selector: str) -> str:
    return "".join(el.get_text() for el in soup.select(selector)).strip()


class ExamsnetExtractor(QuestionExtractor):
    """Plain text question pages (chapter-wise / full tests)."""

    name = "examsnet"

    def extract_text(self, soup: BeautifulSoup) -> str:
        question_text = _joined_text(soup, QUESTION_TEXT_SELECTOR)
        if not question_text:
            question_text = _joined_text(soup, FALLBACK_TEXT_SELECTOR)
        if not question_text:
            logger.warning(f"[{self.name}] no question text found")
        return question_text

    def extract_options(self, soup: BeautifulSoup) -> List[QuestionOption]:
        return [
            QuestionOption(id=option_id_for(i), text=span.get_text().strip())
            for i, span in enumerate(soup.select(OPTION_SELECTOR))
        ]


class ExamsnetImageExtractor(ExamsnetExtractor):
    """Previous-year paper pages with image placeholders and a paper tag."""

    name = "examsnet-image"

    def __init__(self, image_base_url: Optional[str] = None, image_extension: Optional[str] = None):
        self.image_base_url = image_base_url if image_base_url is not None else settings.IMAGE_BASE_URL
        self.image_extension = image_extension if image_extension is not None else settings.IMAGE_EXTENSION

    def extract_images(self, soup: BeautifulSoup) -> List[str]:
        urls = []
        for marker in soup.select(IMAGE_MARKER_SELECTOR):
            match = IMAGE_TOKEN_RE.search(" ".join(marker.get("class") or []))
            if not match:
                continue
            # no check that the image actually exists
            urls.append(f"{self.image_base_url}{match.group(1)}{self.image_extension}")
        return urls

    def extract_metadata(self, soup: BeautifulSoup) -> Dict[str, str]:
        metadata = {"year": UNKNOWN, "exam_session": UNKNOWN}

        question = soup.select_one(QUESTION_TEXT_SELECTOR)
        if question is None:
            return metadata

        siblings = list(question.previous_siblings) + list(question.next_siblings)
        for node in siblings:
            text = node.get_text(" ") if isinstance(node, Tag) else str(node)
            match = PAPER_TAG_RE.search(text)
            if match:
                metadata["year"] = match.group(1)
                metadata["exam_session"] = match.group(2)
                break
        return metadata
