"""
Exceptions raised by the question store and translated into
`{status: "error", ...}` envelopes by the API layer.
"""

from typing import Optional


class QuestionBankError(Exception):
    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details


class QuestionFileNotFound(QuestionBankError):
    status_code = 404
    message = "Question file not found"


class UnknownSubjectError(QuestionBankError):
    status_code = 404
    message = "Subject not found"


class InsufficientQuestionsError(QuestionBankError):
    status_code = 400
    message = "Not enough questions available"

    def __init__(self, available: int, requested: int, noun: str = "questions"):
        super().__init__(
            f"Not enough {noun} available",
            f"Only {available} {noun} found, minimum {requested} required",
        )
        self.available = available
        self.requested = requested
