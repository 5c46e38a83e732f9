import pytest
from bs4 import BeautifulSoup

from qbank.models import UNKNOWN
from qbank.utils.extractors import (
    ExamsnetExtractor,
    ExamsnetImageExtractor,
    get_extractor,
)

from conftest import question_page


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_question_text_from_primary_selector():
    soup = soup_of(question_page("  Who founded the Maurya empire?  ", ["Ashoka", "Chandragupta"]))
    assert ExamsnetExtractor().extract_text(soup) == "Who founded the Maurya empire?"


def test_question_text_falls_back_to_article():
    soup = soup_of("<html><body><article>\n  Which river is the longest?\n</article></body></html>")
    assert ExamsnetExtractor().extract_text(soup) == "Which river is the longest?"


def test_question_text_missing_is_empty_and_logged(caplog):
    soup = soup_of("<html><body><p>nothing here</p></body></html>")
    with caplog.at_level("WARNING", logger="scrape"):
        assert ExamsnetExtractor().extract_text(soup) == ""
    assert "no question text" in caplog.text


def test_options_get_positional_ids():
    soup = soup_of(question_page("Q?", ["Delhi", " Mumbai ", "Pune", "Agra"]))
    options = ExamsnetExtractor().extract_options(soup)

    assert [o.id for o in options] == ["A", "B", "C", "D"]
    assert [o.text for o in options] == ["Delhi", "Mumbai", "Pune", "Agra"]
    assert all(not o.has_image and o.image_url == "" for o in options)


def test_options_beyond_fourth_use_numeric_ids():
    soup = soup_of(question_page("Q?", ["a", "b", "c", "d", "e", "f"]))
    options = ExamsnetExtractor().extract_options(soup)
    assert [o.id for o in options] == ["A", "B", "C", "D", "4", "5"]


def test_no_options():
    assert ExamsnetExtractor().extract_options(soup_of(question_page("Q?"))) == []


def test_text_variant_has_no_images_or_metadata():
    soup = soup_of(question_page("Q?", extra='<span class="qimg qimg-abc"></span>'))
    extractor = ExamsnetExtractor()
    assert extractor.extract_images(soup) == []
    assert extractor.extract_metadata(soup) == {}


def test_image_urls_built_from_class_token():
    extra = '<span class="qimg qimg-8f3a1c"></span><p>x</p><div class="figure qimg-fig_2"></div><span class="qimg"></span>'
    soup = soup_of(question_page("Q?", extra=extra))
    extractor = ExamsnetImageExtractor(image_base_url="https://img.test/q/", image_extension=".png")

    assert extractor.extract_images(soup) == [
        "https://img.test/q/8f3a1c.png",
        "https://img.test/q/fig_2.png",
    ]


def test_metadata_from_sibling_paper_tag():
    soup = soup_of(question_page("Q?", extra="<small>Asked in [2019 CDS-II]</small>"))
    assert ExamsnetImageExtractor().extract_metadata(soup) == {"year": "2019", "exam_session": "II"}


def test_metadata_session_one():
    soup = soup_of(question_page("Q?", extra="<small>[2021 CDS-I]</small>"))
    assert ExamsnetImageExtractor().extract_metadata(soup) == {"year": "2021", "exam_session": "I"}


@pytest.mark.parametrize("extra", ["", "<small>[2019 NDA-II]</small>", "<small>2019 CDS-II</small>"])
def test_metadata_unknown_without_paper_tag(extra):
    soup = soup_of(question_page("Q?", extra=extra))
    assert ExamsnetImageExtractor().extract_metadata(soup) == {"year": UNKNOWN, "exam_session": UNKNOWN}


def test_get_extractor_by_variant():
    assert isinstance(get_extractor("examsnet"), ExamsnetExtractor)
    assert isinstance(get_extractor("examsnet-image"), ExamsnetImageExtractor)
    with pytest.raises(ValueError):
        get_extractor("nope")


def test_image_extractor_defaults_come_from_settings():
    from qbank import settings

    extractor = ExamsnetImageExtractor()
    assert extractor.image_base_url == settings.IMAGE_BASE_URL
    assert extractor.image_extension == settings.IMAGE_EXTENSION
