#!/usr/bin/env python3
"""
Question Scraper Service

Fetches one page per question number, extracts the question, its options,
images and the accepted answer, and writes the whole batch as one JSON file.

Features:
- Pluggable page-layout extractors (see qbank.utils.extractors)
- JSON-LD accepted-answer resolution with a first/last match tie-break
- Failed pages are logged and skipped, never abort the batch
- Sequential by default, optional bounded worker pool
"""

import argparse
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Dict, Any

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from qbank.models import QuestionRecord, ScrapeConfig, UrlStyle, TieBreak
from qbank.services.page_fetcher import PageFetcher
from qbank.services.record_assembler import assemble_record
from qbank.utils.answer_resolver import resolve_answer
from qbank.utils.extractors import get_extractor, EXTRACTORS

logger = logging.getLogger("scrape")


class QuestionScraper:
    def __init__(self, config: ScrapeConfig, fetcher: Optional[PageFetcher] = None):
        self.config = config
        self.extractor = get_extractor(config.variant)
        self.fetcher = fetcher or PageFetcher(
            config.base_url,
            url_style=config.url_style,
            retries=config.retries,
        )

    def parse_question(self, html: str, question_number: int) -> QuestionRecord:
        """Turn one fetched page into a QuestionRecord."""
        cfg = self.config
        soup = BeautifulSoup(html, "html.parser")

        options = self.extractor.extract_options(soup)
        return assemble_record(
            exam_type=cfg.exam_type,
            subject=cfg.subject,
            year=cfg.year,
            exam_session=cfg.exam_session,
            serial_no=question_number,
            question_text=self.extractor.extract_text(soup),
            options=options,
            image_urls=self.extractor.extract_images(soup),
            answer=resolve_answer(soup, options, cfg.tie_break, label=str(question_number)),
            page_metadata=self.extractor.extract_metadata(soup),
        )

    def scrape_question(self, question_number: int) -> Optional[QuestionRecord]:
        html = self.fetcher.fetch(question_number)
        if html is None:
            return None
        try:
            record = self.parse_question(html, question_number)
        except Exception as e:
            logger.error(f"[{self.extractor.name}] Error extracting question {question_number}: {e}", exc_info=True)
            return None
        logger.info(f"[{self.extractor.name}] question {question_number}: {record.content.question_text[:60]}")
        return record

    def scrape_all(self) -> List[QuestionRecord]:
        """Scrape every configured question number, keeping index order and dropping failures."""
        indices = self.config.indices
        if self.config.concurrency > 1:
            with ThreadPoolExecutor(max_workers=self.config.concurrency) as pool:
                results = list(pool.map(self.scrape_question, indices))
        else:
            results = [self.scrape_question(n) for n in indices]
        return [record for record in results if record is not None]

    def run(self) -> Dict[str, Any]:
        cfg = self.config
        logger.info(
            f"[{self.extractor.name}] scraping {cfg.total_questions} questions from {cfg.base_url}"
        )
        try:
            records = self.scrape_all()
        finally:
            self.fetcher.close()

        output_path = write_batch(records, cfg.output_path)
        logger.info(f"✅ Successfully saved {len(records)} questions to {output_path}")
        return {
            "success": True,
            "output_path": str(output_path),
            "total_requested": cfg.total_questions,
            "total_saved": len(records),
            "failed": cfg.total_questions - len(records),
        }


def write_batch(records: List[QuestionRecord], output_path) -> Path:
    """Write the batch as one pretty-printed JSON array. Errors propagate."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([r.to_json_dict() for r in records], f, indent=2, ensure_ascii=False)
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape exam questions into a JSON file")
    parser.add_argument("base_url", help="Question URL prefix; the question number is appended")
    parser.add_argument("-n", "--total", type=int, required=True, help="Number of questions to fetch")
    parser.add_argument("--subject", required=True)
    parser.add_argument("--year", type=int, required=True)
    parser.add_argument("--session", required=True, help="Exam session, e.g. I or II")
    parser.add_argument("--exam-type", default="UPSC_CDS")
    parser.add_argument("--variant", default="examsnet", choices=sorted(EXTRACTORS))
    parser.add_argument("--url-style", default=UrlStyle.CONCAT.value, choices=[s.value for s in UrlStyle])
    parser.add_argument("--tie-break", default=TieBreak.LAST_MATCH.value, choices=[t.value for t in TieBreak])
    parser.add_argument("--concurrency", type=int, default=1)
    parser.add_argument("--retries", type=int, default=0)
    parser.add_argument("--start", type=int, default=1, help="First question number")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-o", "--output", help="Output JSON path")
    output.add_argument("--by-subject", action="store_true", help="Write to <subject>/<subject>.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def config_from_args(args: argparse.Namespace) -> ScrapeConfig:
    output_path = args.output
    if args.by_subject:
        output_path = ScrapeConfig.subject_output_path(args.subject)
    return ScrapeConfig(
        base_url=args.base_url,
        total_questions=args.total,
        subject=args.subject,
        year=args.year,
        exam_session=args.session,
        output_path=output_path,
        exam_type=args.exam_type,
        variant=args.variant,
        url_style=args.url_style,
        tie_break=args.tie_break,
        concurrency=args.concurrency,
        retries=args.retries,
        start_index=args.start,
    )


def main(argv=None):
    """CLI interface for the question scraper"""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    )

    result = QuestionScraper(config_from_args(args)).run()
    print(f"\n🎉 Saved {result['total_saved']}/{result['total_requested']} questions to {result['output_path']}")


if __name__ == "__main__":
    main()
