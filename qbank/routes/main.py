# qbank/routes/main.py

from fastapi import APIRouter

router = APIRouter(prefix="/api")


@router.get("", summary="API index")
def api_index():
    return {
        "status": "success",
        "message": "Welcome to UPSC and CDS Questions API",
        "endpoints": {
            "/api/upsc": "Access UPSC related questions",
            "/api/cds": "Access CDS related questions",
        },
    }
