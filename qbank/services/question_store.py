"""
Read-only access to the scraped question files.

Files are laid out under DATA_DIR the way the scrapers and the manual
collection left them:

    CDS General Studies/2024-General Studies-<subject>.json
    CDS Science Chapter Wise/<Subject>.json
    CDS PYQs/<year>/<CDS I|CDS II>/UPSC_CDS_<year>_<I|II>_<subject>_QP.json
    CDS_MATHS_PYQs/*.json
    UPSC PRELIMS PYQs/<year>_General-Studies_<1|2>.json
    UPSC_Essays/<year>_essays.json
    UPSC_MAIN_CSE_GS_PAPERS/UPSC_MAIN_CSE_GS_<year>_PAPER_<n>.json
    CSE_General_Studies_Chapter_Wise/<Prelims|Mains>_General_Studies_<Topic>.json
"""

import json
import logging
import random
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from qbank.errors import (
    QuestionFileNotFound,
    UnknownSubjectError,
    InsufficientQuestionsError,
)

logger = logging.getLogger(__name__)

CDS_GENERAL_STUDIES_DIR = "CDS General Studies"
CDS_SCIENCE_DIR = "CDS Science Chapter Wise"
CDS_PYQS_DIR = "CDS PYQs"
CDS_MATHS_DIR = "CDS_MATHS_PYQs"
UPSC_PRELIMS_DIR = "UPSC PRELIMS PYQs"
UPSC_ESSAYS_DIR = "UPSC_Essays"
UPSC_MAINS_GS_DIR = "UPSC_MAIN_CSE_GS_PAPERS"
CHAPTER_WISE_DIR = "CSE_General_Studies_Chapter_Wise"

CDS_EXAMS = {"I": "CDS I", "II": "CDS II"}

GENERAL_STUDIES_SUBJECTS = {
    "economy": "2024-General Studies-economy.json",
    "general-knowledge": "2024-General Studies-general-knowledge.json",
    "geography": "2024-General Studies-geography.json",
    "history": "2024-General Studies-history.json",
    "polity": "2024-General Studies-polity.json",
}

SCIENCE_SUBJECTS = {
    "biology": "Biology.json",
    "chemistry": "Chemistry.json",
    "physics": "Physics.json",
}

PRELIMS_PAPERS = {1: "General Studies 1", 2: "General Studies 2"}
MAINS_GS_PAPERS = ["Paper 1", "Paper 2", "Paper 3", "Paper 4"]

# slug -> (file stem, display name)
CHAPTER_WISE_TOPICS = {
    "social-issues": ("SocialIssues", "Social Issues"),
    "science-and-technology": ("ScienceAndTechnology", "Science and Technology"),
    "security-issues": ("SecurityIssues", "Security Issues"),
    "international-relations": ("InternationalRelations", "International Relations"),
    "indian-polity": ("IndianPolityAndGovernance", "Indian Polity and Governance"),
    "history-and-culture": ("HistoryAndCulture", "History and Culture"),
    "health-and-education": ("HealthAndEducation", "Health and Education"),
    "geography-and-environment": ("GeographyAndEnvironment", "Geography and Environment"),
    "ethics-and-governance": ("EthicsAndGovernance", "Ethics and Governance"),
    "economy-and-development": ("EconomyAndDevelopment", "Economy and Development"),
}
# stage -> (sample size, topics without a file)
CHAPTER_WISE_STAGES = {
    "Prelims": (50, set()),
    "Mains": (10, {"security-issues"}),
}

YEAR_RE = re.compile(r"^\d{4}$")
NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")


def extract_questions(data: Any) -> List[Any]:
    """
    Return the question list from a loaded JSON document.

    An array root is returned as-is; for an object root the first
    array-valued key wins; anything else yields an empty list.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for value in data.values():
            if isinstance(value, list):
                return value
    return []


def sample_questions(items: List[Any], count: int, rng: Optional[random.Random] = None, noun: str = "questions") -> List[Any]:
    """Pick `count` distinct items at random; never returns a short list."""
    if len(items) < count:
        raise InsufficientQuestionsError(len(items), count, noun)
    return (rng or random).sample(items, count)


class QuestionStore:
    def __init__(self, data_dir, rng: Optional[random.Random] = None):
        self.data_dir = Path(data_dir)
        self.rng = rng or random.Random()

    # ── file helpers ─────────────────────────────────────────────────────

    def read_json_file(self, path: Path, ascii_only: bool = False) -> Any:
        if not path.is_file():
            logger.warning(f"File does not exist: {path}")
            raise QuestionFileNotFound(
                f"File {path.name} not found",
                f"File path: {path}",
            )
        text = path.read_text(encoding="utf-8")
        if ascii_only:
            text = NON_ASCII_RE.sub("", text)
        return json.loads(text)

    def _list_dir(self, path: Path) -> List[Path]:
        if not path.is_dir():
            raise QuestionFileNotFound(
                f"Directory {path.name} not found",
                f"Directory path: {path}",
            )
        return sorted(path.iterdir())

    # ── CDS ──────────────────────────────────────────────────────────────

    def cds_general_studies(self, subject: str) -> List[Any]:
        if subject not in GENERAL_STUDIES_SUBJECTS:
            raise UnknownSubjectError()
        path = self.data_dir / CDS_GENERAL_STUDIES_DIR / GENERAL_STUDIES_SUBJECTS[subject]
        return extract_questions(self.read_json_file(path))

    def cds_science(self, subject: str) -> List[Any]:
        if subject not in SCIENCE_SUBJECTS:
            raise UnknownSubjectError()
        path = self.data_dir / CDS_SCIENCE_DIR / SCIENCE_SUBJECTS[subject]
        return extract_questions(self.read_json_file(path))

    @staticmethod
    def cds_paper_filename(year: str, exam: str, subject: str) -> str:
        exam_part = "I" if exam == CDS_EXAMS["I"] else "II"
        return f"UPSC_CDS_{year}_{exam_part}_{subject}_QP.json"

    def cds_paper_path(self, year: str, session: str, subject: str) -> Path:
        """Location of one CDS paper keyed by (year, session, subject)."""
        exam = CDS_EXAMS["I"] if session == "I" else CDS_EXAMS["II"]
        return self.data_dir / CDS_PYQS_DIR / str(year) / exam / self.cds_paper_filename(year, exam, subject)

    def cds_pyq_structure(self) -> Dict[str, Dict[str, List[str]]]:
        structure: Dict[str, Dict[str, List[str]]] = {}
        for year_dir in self._list_dir(self.data_dir / CDS_PYQS_DIR):
            if not (year_dir.is_dir() and YEAR_RE.match(year_dir.name)):
                continue
            structure[year_dir.name] = {}
            for exam_dir in sorted(year_dir.iterdir()):
                if exam_dir.name not in CDS_EXAMS.values() or not exam_dir.is_dir():
                    continue
                subjects = []
                for f in sorted(exam_dir.iterdir()):
                    parts = f.name.split("_")
                    if f.suffix == ".json" and len(parts) > 4:
                        subjects.append(parts[4])
                structure[year_dir.name][exam_dir.name] = subjects
        return structure

    def cds_pyq(self, year: str, session: str, subject: str) -> Any:
        return self.read_json_file(self.cds_paper_path(year, session, subject))

    def cds_mathematics(self, limit: int = 100) -> Dict[str, Any]:
        all_questions: List[Any] = []
        for f in self._list_dir(self.data_dir / CDS_MATHS_DIR):
            if f.suffix == ".json":
                all_questions.extend(extract_questions(self.read_json_file(f)))

        shuffled = list(all_questions)
        self.rng.shuffle(shuffled)
        limited = shuffled[:limit]
        return {
            "totalQuestions": len(all_questions),
            "returnedQuestions": len(limited),
            "data": limited,
        }

    def cds_random_english(self) -> Dict[str, Any]:
        pyqs_dir = self.data_dir / CDS_PYQS_DIR
        years = [p for p in self._list_dir(pyqs_dir) if p.is_dir() and YEAR_RE.match(p.name)]
        if not years:
            raise QuestionFileNotFound("No CDS papers found", f"Directory path: {pyqs_dir}")
        year_dir = self.rng.choice(years)

        # only sessions that actually have an English paper
        papers = {
            exam: year_dir / exam / self.cds_paper_filename(year_dir.name, exam, "English")
            for exam in CDS_EXAMS.values()
        }
        exams = [exam for exam, path in papers.items() if path.is_file()]
        if not exams:
            raise QuestionFileNotFound(f"No CDS English papers found for {year_dir.name}", f"Directory path: {year_dir}")
        exam = self.rng.choice(exams)

        return {"year": year_dir.name, "exam": exam, "data": self.read_json_file(papers[exam])}

    # ── UPSC ─────────────────────────────────────────────────────────────

    def upsc_prelims_papers(self) -> Dict[str, List[str]]:
        data: Dict[str, List[str]] = {}
        for f in self._list_dir(self.data_dir / UPSC_PRELIMS_DIR):
            if f.suffix == ".json":
                data.setdefault(f.name.split("_")[0], list(PRELIMS_PAPERS.values()))
        return data

    def upsc_prelims_paper(self, year: str, paper: int, count: int) -> Dict[str, Any]:
        path = self.data_dir / UPSC_PRELIMS_DIR / f"{year}_General-Studies_{paper}.json"
        return self.random_questions(path, count, strict_array=True)

    def essay_years(self) -> List[str]:
        essay_dir = self.data_dir / UPSC_ESSAYS_DIR
        files = self._list_dir(essay_dir)
        if not files:
            raise QuestionFileNotFound("No essay files found in directory", f"Directory path: {essay_dir}")
        years = [f.name.split("_")[0] for f in files if f.suffix == ".json"]
        if not years:
            raise QuestionFileNotFound("No valid essay files found", f"Directory path: {essay_dir}")
        return years

    def essays(self, year: str, count: int = 2) -> Dict[str, Any]:
        essay_dir = self.data_dir / UPSC_ESSAYS_DIR
        self._list_dir(essay_dir)
        path = essay_dir / f"{year}_essays.json"
        if not path.is_file():
            raise QuestionFileNotFound(f"Essay file for year {year} not found", f"File path: {path}")

        data = self.read_json_file(path, ascii_only=True)
        all_essays = data if isinstance(data, list) else []
        return {
            "essays": sample_questions(all_essays, count, self.rng, noun="essays"),
            "totalEssays": len(all_essays),
        }

    def mains_gs_papers(self) -> Dict[str, List[str]]:
        pattern = re.compile(r"^UPSC_MAIN_CSE_GS_(\d{4})_PAPER_\d+\.json$")
        years = sorted({
            m.group(1)
            for f in self._list_dir(self.data_dir / UPSC_MAINS_GS_DIR)
            if (m := pattern.match(f.name))
        })
        return {year: list(MAINS_GS_PAPERS) for year in years}

    def mains_gs_paper(self, year: str, paper: int) -> Any:
        path = self.data_dir / UPSC_MAINS_GS_DIR / f"UPSC_MAIN_CSE_GS_{year}_PAPER_{paper}.json"
        return self.read_json_file(path, ascii_only=True)

    def chapter_wise(self, stage: str, topic: str) -> Dict[str, Any]:
        count, missing = CHAPTER_WISE_STAGES[stage]
        if topic not in CHAPTER_WISE_TOPICS or topic in missing:
            raise UnknownSubjectError("Topic not found")
        stem, name = CHAPTER_WISE_TOPICS[topic]
        path = self.data_dir / CHAPTER_WISE_DIR / f"{stage}_General_Studies_{stem}.json"
        return {"subject": name, "data": self.random_questions(path, count, strict_array=True)}

    # ── sampling ─────────────────────────────────────────────────────────

    def random_questions(self, path: Path, count: int, strict_array: bool = False) -> Dict[str, Any]:
        """
        `count` random questions from one file plus the file's total.

        With `strict_array` only an array root counts as questions.
        """
        data = self.read_json_file(path, ascii_only=True)
        if strict_array:
            all_questions = data if isinstance(data, list) else []
        else:
            all_questions = extract_questions(data)
        return {
            "questions": sample_questions(all_questions, count, self.rng),
            "totalQuestions": len(all_questions),
        }
