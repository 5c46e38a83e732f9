from typing import Dict, List, Optional, Union

from qbank.models import (
    QuestionRecord,
    QuestionMetadata,
    QuestionContent,
    QuestionOption,
    QuestionSolution,
    ResolvedAnswer,
    build_question_id,
)


def assemble_record(
    *,
    exam_type: str,
    subject: str,
    year: Union[int, str],
    exam_session: str,
    serial_no: int,
    question_text: str = "",
    options: Optional[List[QuestionOption]] = None,
    image_urls: Optional[List[str]] = None,
    answer: Optional[ResolvedAnswer] = None,
    page_metadata: Optional[Dict[str, str]] = None,
    topic: str = "",
    subtopic: str = "",
) -> QuestionRecord:
    """
    Merge extracted fields and run constants into one QuestionRecord.

    Metadata read from the page (year / exam_session) replaces the run
    constants, including the literal "Unknown" when the page had none.
    """
    if page_metadata:
        year = page_metadata.get("year", year)
        exam_session = page_metadata.get("exam_session", exam_session)

    image_urls = list(image_urls or [])
    answer = answer or ResolvedAnswer()

    return QuestionRecord(
        exam_type=exam_type,
        metadata=QuestionMetadata(
            question_id=build_question_id(year, exam_session, exam_type, subject, serial_no),
            serial_no=str(serial_no),
            subject=subject,
            topic=topic,
            subtopic=subtopic,
            year=year,
            exam_session=exam_session,
        ),
        content=QuestionContent(
            question_text=question_text or "",
            has_image=bool(image_urls),
            image_urls=image_urls,
        ),
        options=list(options or []),
        solution=QuestionSolution(
            correct_option=answer.correct_option,
            explanation=answer.explanation,
        ),
    )
