# qbank/routes/cds.py

from fastapi import APIRouter

from .storeDep import StoreDep

router = APIRouter(prefix="/api/cds")


@router.get("", summary="CDS endpoint index")
def cds_index():
    return {
        "status": "success",
        "endpoints": {
            "/pyqs": "Get CDS Previous Year Questions by year and exam",
            "/general-studies": {
                "economy": "Get CDS General Studies Economy questions",
                "general-knowledge": "Get CDS General Studies General Knowledge questions",
                "geography": "Get CDS General Studies Geography questions",
                "history": "Get CDS General Studies History questions",
                "polity": "Get CDS General Studies Polity questions",
            },
            "/science": {
                "biology": "Get CDS Science Biology questions",
                "chemistry": "Get CDS Science Chemistry questions",
                "physics": "Get CDS Science Physics questions",
            },
            "/mathematics": "Get 100 random CDS Mathematics questions",
            "/english": "Get random CDS English questions from any year",
        },
    }


@router.get("/general-studies/{subject}")
def general_studies(subject: str, store: StoreDep):
    questions = store.cds_general_studies(subject)
    return {
        "status": "success",
        "subject": subject,
        "totalQuestions": len(questions),
        "data": questions,
    }


@router.get("/science/{subject}")
def science(subject: str, store: StoreDep):
    questions = store.cds_science(subject)
    return {
        "status": "success",
        "subject": subject,
        "totalQuestions": len(questions),
        "data": questions,
    }


@router.get("/pyqs")
def pyqs_structure(store: StoreDep):
    """Years → CDS I / CDS II → available subjects."""
    return {"status": "success", "data": store.cds_pyq_structure()}


@router.get("/pyqs/{year}/{exam}/{subject}")
def pyq_paper(year: str, exam: str, subject: str, store: StoreDep):
    return {"status": "success", "data": store.cds_pyq(year, exam, subject)}


@router.get("/mathematics")
def mathematics(store: StoreDep):
    return {"status": "success", **store.cds_mathematics(limit=100)}


@router.get("/english")
def english(store: StoreDep):
    return {"status": "success", **store.cds_random_english()}
