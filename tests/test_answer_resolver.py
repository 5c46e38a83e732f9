import json

from bs4 import BeautifulSoup

from qbank.models import QuestionOption, TieBreak
from qbank.utils.answer_resolver import resolve_answer, match_option, iter_accepted_answers

from conftest import question_page


def opts(*texts):
    return [QuestionOption(id=i, text=t) for i, t in zip("ABCD", texts)]


def ld_script(data) -> str:
    body = data if isinstance(data, str) else json.dumps(data)
    return f'<script type="application/ld+json">{body}</script>'


def test_single_containment_resolves_option():
    html = question_page("Capital?", ["Delhi", "Mumbai", "Pune", "Agra"], answer="Answer: MUMBAI is the capital of Maharashtra")
    soup = BeautifulSoup(html, "html.parser")

    result = resolve_answer(soup, opts("Delhi", "Mumbai", "Pune", "Agra"))

    assert result.correct_option == "B"
    assert result.explanation == "Answer: MUMBAI is the capital of Maharashtra"


def test_no_structured_data_leaves_answer_empty():
    soup = BeautifulSoup(question_page("Capital?", ["Delhi", "Mumbai"]), "html.parser")
    result = resolve_answer(soup, opts("Delhi", "Mumbai"))
    assert result.correct_option == ""
    assert result.explanation == ""


def test_no_matching_option_keeps_explanation():
    soup = BeautifulSoup(question_page("Q?", ["Delhi", "Mumbai"], answer="None of these"), "html.parser")
    result = resolve_answer(soup, opts("Delhi", "Mumbai"))
    assert result.correct_option == ""
    assert result.explanation == "None of these"


def test_tie_break_policies():
    options = opts("Gandhi", "Mahatma Gandhi", "Nehru")
    answer = "The correct answer is Mahatma Gandhi"

    assert match_option(answer, options, TieBreak.LAST_MATCH) == "B"
    assert match_option(answer, options, TieBreak.FIRST_MATCH) == "A"


def test_empty_option_text_never_matches():
    assert match_option("anything", opts("", "")) is None


def test_non_qapage_and_malformed_blocks_are_skipped(caplog):
    head = (
        ld_script({"@type": "Organization", "name": "x"})
        + ld_script("{not json")
        + ld_script({"@type": "QAPage", "mainEntity": {"acceptedAnswer": {"text": "It is Pune"}}})
    )
    soup = BeautifulSoup(f"<html><head>{head}</head><body></body></html>", "html.parser")

    with caplog.at_level("ERROR", logger="scrape"):
        result = resolve_answer(soup, opts("Delhi", "Pune"), label="7")

    assert result.correct_option == "B"
    assert result.explanation == "It is Pune"
    assert "question 7" in caplog.text


def test_qapage_without_accepted_answer_is_ignored():
    head = ld_script({"@type": "QAPage", "mainEntity": {"name": "Q"}})
    soup = BeautifulSoup(f"<html><head>{head}</head></html>", "html.parser")
    assert list(iter_accepted_answers(soup)) == []


def test_later_block_overrides_explanation():
    head = (
        ld_script({"@type": "QAPage", "mainEntity": {"acceptedAnswer": {"text": "Delhi"}}})
        + ld_script({"@type": "QAPage", "mainEntity": {"acceptedAnswer": {"text": "no match here"}}})
    )
    soup = BeautifulSoup(f"<html><head>{head}</head></html>", "html.parser")

    result = resolve_answer(soup, opts("Delhi", "Pune"))

    assert result.correct_option == "A"
    assert result.explanation == "no match here"
