"""
Resolve the correct option from the page's schema.org JSON-LD block.

Question pages embed something like:

<script type="application/ld+json">
{"@type": "QAPage",
 "mainEntity": {"@type": "Question", "name": "...",
                "acceptedAnswer": {"@type": "Answer", "text": "Answer: Option two ..."}}}
</script>

The accepted answer text is kept verbatim as the explanation and the correct
option is whichever option text it contains (case-insensitive).
"""

import json
import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup

from qbank.models import QuestionOption, ResolvedAnswer, TieBreak

logger = logging.getLogger("scrape")

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'
QA_PAGE_TYPE = "QAPage"


def iter_accepted_answers(soup: BeautifulSoup, label: str = "") -> Iterator[str]:
    """Yield the accepted-answer text of every QAPage block, in page order."""
    for script in soup.select(JSON_LD_SELECTOR):
        try:
            data = json.loads(script.get_text())
            if not isinstance(data, dict) or data.get("@type") != QA_PAGE_TYPE:
                continue
            accepted = (data.get("mainEntity") or {}).get("acceptedAnswer")
            if not accepted:
                continue
            if isinstance(accepted, list):
                accepted = accepted[0]
            text = accepted["text"]
            if not isinstance(text, str):
                raise TypeError(f"acceptedAnswer.text is {type(text).__name__}, expected str")
        except (ValueError, TypeError, KeyError, AttributeError, IndexError) as e:
            logger.error(f"[answer] Error parsing JSON-LD for question {label}: {e}")
            continue
        yield text


def match_option(answer_text: str, options: List[QuestionOption], tie_break: TieBreak = TieBreak.LAST_MATCH) -> Optional[str]:
    """
    Id of the option whose text is contained in `answer_text`.

    Several options can be contained in the same answer (or in each other);
    `tie_break` decides whether the first or the last one in page order wins.
    Options with empty text never match.
    """
    haystack = answer_text.lower()
    matched = None
    for opt in options:
        needle = opt.text.lower()
        if not needle or needle not in haystack:
            continue
        matched = opt.id
        if tie_break == TieBreak.FIRST_MATCH:
            break
    return matched


def resolve_answer(
    soup: BeautifulSoup,
    options: List[QuestionOption],
    tie_break: TieBreak = TieBreak.LAST_MATCH,
    label: str = "",
) -> ResolvedAnswer:
    correct_option = ""
    explanation = ""

    # a later QAPage block overrides an earlier one
    for answer_text in iter_accepted_answers(soup, label):
        explanation = answer_text
        matched = match_option(answer_text, options, tie_break)
        if matched:
            correct_option = matched

    return ResolvedAnswer(correct_option=correct_option, explanation=explanation)
