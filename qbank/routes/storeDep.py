# qbank/routes/storeDep.py

"""
storeDep.py

Dependency giving each request a QuestionStore rooted at the configured
DATA_DIR. Tests override `get_question_store` to point at a temp directory.
"""
from typing import Annotated

from fastapi import Depends

from qbank import settings
from qbank.services.question_store import QuestionStore


def get_question_store() -> QuestionStore:
    return QuestionStore(settings.DATA_DIR)


# Dependency annotations
StoreDep = Annotated[QuestionStore, Depends(get_question_store)]
