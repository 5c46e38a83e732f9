# qbank/routes/upsc.py

import logging

from fastapi import APIRouter

from qbank.errors import UnknownSubjectError
from qbank.services.question_store import PRELIMS_PAPERS
from .storeDep import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upsc")

# paper number -> questions drawn per request
PRELIMS_SAMPLE_SIZES = {1: 100, 2: 80}


@router.get("", summary="UPSC endpoint index")
def upsc_index():
    return {
        "status": "success",
        "endpoints": {
            "/prelims": "Get UPSC Prelims questions",
            "/mains/gs": "Get UPSC Mains GS papers",
            "/mains/essay": "Get UPSC essay topics",
        },
    }


# ── 1) Prelims ──────────────────────────────────────────────────────────────

@router.get("/prelims")
def prelims(store: StoreDep):
    return {"status": "success", "data": store.upsc_prelims_papers()}


def _prelims_paper(store, year: str, paper: int):
    logger.info(f"Requested prelims GS{paper} for year: {year}")
    result = store.upsc_prelims_paper(year, paper, PRELIMS_SAMPLE_SIZES[paper])
    return {
        "status": "success",
        "year": year,
        "paper": PRELIMS_PAPERS[paper],
        "data": result,
    }


@router.get("/prelims/gs1/{year}")
def prelims_gs1(year: str, store: StoreDep):
    return _prelims_paper(store, year, 1)


@router.get("/prelims/gs2/{year}")
def prelims_gs2(year: str, store: StoreDep):
    return _prelims_paper(store, year, 2)


# ── 2) Mains essays ─────────────────────────────────────────────────────────

@router.get("/mains/essay")
def essay_years(store: StoreDep):
    return {"status": "success", "data": {"availableYears": store.essay_years()}}


@router.get("/mains/essay/{year}")
def essays(year: str, store: StoreDep):
    return {"status": "success", "year": year, "data": store.essays(year, count=2)}


# ── 3) Mains general studies ────────────────────────────────────────────────

@router.get("/mains/gs")
def mains_gs(store: StoreDep):
    return {"status": "success", "data": store.mains_gs_papers()}


@router.get("/mains/gs/paper{paper}/{year}")
def mains_gs_paper(paper: int, year: str, store: StoreDep):
    if paper not in (1, 2, 3, 4):
        raise UnknownSubjectError("Paper not found")
    return {
        "status": "success",
        "year": year,
        "paper": f"General Studies Paper {paper}",
        "data": {"questions": store.mains_gs_paper(year, paper)},
    }


# ── 4) Chapter-wise general studies ─────────────────────────────────────────

@router.get("/prelims/chapter-wise/{topic}")
def prelims_chapter_wise(topic: str, store: StoreDep):
    result = store.chapter_wise("Prelims", topic)
    return {"status": "success", "category": "Prelims", **result}


@router.get("/mains/chapter-wise/{topic}")
def mains_chapter_wise(topic: str, store: StoreDep):
    result = store.chapter_wise("Mains", topic)
    return {"status": "success", "category": "Mains", **result}
