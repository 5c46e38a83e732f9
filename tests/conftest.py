# tests/conftest.py

import json
import random
import sys
import pytest
from pathlib import Path

from dotenv import load_dotenv
from httpx import AsyncClient, ASGITransport

# allow imports from project root
sys.path.append(str(Path(__file__).resolve().parents[1]))
load_dotenv()

from main import app
from qbank.routes.storeDep import get_question_store
from qbank.services.question_store import QuestionStore


def make_questions(prefix: str, count: int) -> list:
    return [
        {"metadata": {"question_id": f"{prefix}_{i}"}, "content": {"question_text": f"Q{i}"}}
        for i in range(1, count + 1)
    ]


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def question_page(text: str = "", options=(), answer=None, extra: str = "") -> str:
    """Minimal examsnet-style question page."""
    items = "".join(
        f'<li class="list-group-item"><label><input type="radio"/> <span>{o}</span></label></li>'
        for o in options
    )
    ld = ""
    if answer is not None:
        block = {
            "@context": "https://schema.org",
            "@type": "QAPage",
            "mainEntity": {
                "@type": "Question",
                "name": text,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            },
        }
        ld = f'<script type="application/ld+json">{json.dumps(block)}</script>'
    question = f'<div class="question-text">{text}</div>' if text else ""
    return (
        f"<html><head>{ld}</head><body>"
        f"<div class='qbox'>{question}{extra}<ul>{items}</ul></div>"
        f"</body></html>"
    )


# ─── A small on-disk question corpus ────────────────────────────────────────

@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    root = tmp_path / "data"

    write_json(root / "CDS General Studies" / "2024-General Studies-history.json", make_questions("hist", 3))
    write_json(root / "CDS Science Chapter Wise" / "Physics.json", {"questions": make_questions("phy", 2)})

    pyqs = root / "CDS PYQs"
    write_json(pyqs / "2023" / "CDS I" / "UPSC_CDS_2023_I_English_QP.json", make_questions("eng23i", 4))
    write_json(pyqs / "2023" / "CDS II" / "UPSC_CDS_2023_II_Maths_QP.json", make_questions("m23ii", 2))
    (pyqs / "notes").mkdir(parents=True)

    write_json(root / "CDS_MATHS_PYQs" / "a.json", make_questions("ma", 60))
    write_json(root / "CDS_MATHS_PYQs" / "b.json", {"questions": make_questions("mb", 60)})

    write_json(root / "UPSC PRELIMS PYQs" / "2022_General-Studies_1.json", make_questions("gs1", 120))
    write_json(root / "UPSC PRELIMS PYQs" / "2022_General-Studies_2.json", make_questions("gs2", 40))

    write_json(root / "UPSC_Essays" / "2021_essays.json", ["Essay one", "Essay two", "Essay thrée"])
    write_json(root / "UPSC_MAIN_CSE_GS_PAPERS" / "UPSC_MAIN_CSE_GS_2020_PAPER_1.json", ["Discuss the past"])

    chapters = root / "CSE_General_Studies_Chapter_Wise"
    write_json(chapters / "Prelims_General_Studies_SocialIssues.json", make_questions("psi", 55))
    write_json(chapters / "Mains_General_Studies_SocialIssues.json", make_questions("msi", 6))

    return root


@pytest.fixture
def store(data_dir: Path) -> QuestionStore:
    return QuestionStore(data_dir, rng=random.Random(7))


# ─── Provide an httpx AsyncClient against our FastAPI app ──────────────────

@pytest.fixture
async def client(store: QuestionStore) -> AsyncClient:
    app.dependency_overrides[get_question_store] = lambda: store
    # unhandled errors still come back as the 500 envelope
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
