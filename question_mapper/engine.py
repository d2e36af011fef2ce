"""
Analyzer Engine
===============
Main orchestrator that combines text extraction, page segmentation,
page-number recognition and question detection into per-document results.

Usage:
    engine = AnalyzerEngine(config)
    result = engine.analyze(pdf_bytes, "exam.pdf")
    results = engine.analyze_batch([("a.pdf", a_bytes), ("b.pdf", b_bytes)])

Architecture:
    PDF bytes → TextExtractor → flat text + page count → split_into_pages →
    per page: find_printed_page_number + find_questions → AnalysisResult
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import AnalysisError
from .extractor import TextExtractor
from .models import (
    AnalysisResult,
    DocumentResult,
    ErrorResult,
    PageSummaryEntry,
)
from .page_numbers import find_printed_page_number
from .questions import find_questions, question_range
from .segmenter import split_into_pages

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class AnalyzerConfig:
    """Configuration for the analyzer engine."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


def analyze_text(text: str, page_count: int, file_name: str) -> AnalysisResult:
    """
    Build the analysis result for an already extracted document.

    Args:
        text: Flat text of the document.
        page_count: Number of pages reported by the extractor.
        file_name: Name reported back in the result.

    Returns:
        AnalysisResult with one PageSummaryEntry per page, in page order.

    Raises:
        InvalidPageCount: If ``page_count`` is zero or negative.
    """
    pages = split_into_pages(text, page_count)

    page_summary: list[PageSummaryEntry] = []
    printed_page_sequence: list[int] = []

    for page_index, page_text in enumerate(pages, start=1):
        printed_page = find_printed_page_number(page_text)
        questions = find_questions(page_text)

        logger.debug(
            f"{file_name} page {page_index}: printed={printed_page}, "
            f"questions={questions}"
        )

        page_summary.append(PageSummaryEntry(
            printed_page=printed_page if printed_page is not None else page_index,
            range=question_range(questions),
            question_starts=questions,
        ))

        if printed_page is not None:
            printed_page_sequence.append(printed_page)

    # No printed numbers anywhere: fall back to the logical sequence
    if not printed_page_sequence:
        printed_page_sequence = list(range(1, page_count + 1))

    return AnalysisResult(
        file_name=file_name,
        total_pages=page_count,
        printed_page_sequence=printed_page_sequence,
        page_summary=page_summary,
    )


class AnalyzerEngine:
    """
    Main PDF analysis engine.

    Orchestrates the full pipeline:
        1. Text extraction
        2. Page segmentation
        3. Printed page number recognition
        4. Question detection and range synthesis
        5. Result assembly

    Holds no per-document state, so one instance can serve any number of
    documents.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self.extractor = TextExtractor()
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging based on config."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        package_logger = logging.getLogger("question_mapper")
        package_logger.setLevel(log_level)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Console handler
        if not package_logger.handlers:
            console = logging.StreamHandler()
            console.setLevel(log_level)
            console.setFormatter(formatter)
            package_logger.addHandler(console)

        # File handler
        if self.config.log_file:
            log_dir = Path(self.config.log_file).parent
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                self.config.log_file, encoding="utf-8"
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    def analyze(self, data: bytes, file_name: str) -> AnalysisResult:
        """
        Analyze a single PDF held in memory.

        Args:
            data: Raw PDF bytes.
            file_name: Original file name, reported back in the result.

        Returns:
            AnalysisResult for the document.

        Raises:
            ExtractionFailure: If the PDF cannot be read.
            InvalidPageCount: If the PDF reports no pages.
        """
        start_time = time.time()
        logger.info(f"Starting analysis of: {file_name}")

        extracted = self.extractor.extract(data)
        result = analyze_text(extracted.text, extracted.page_count, file_name)

        elapsed = time.time() - start_time
        logger.info(
            f"Analysis of {file_name} complete in {elapsed:.2f}s — "
            f"{result.total_pages} pages, "
            f"{sum(1 for p in result.page_summary if p.question_starts)} "
            f"pages with questions"
        )
        return result

    def analyze_batch(
        self,
        documents: list[tuple[str, bytes]],
    ) -> list[DocumentResult]:
        """
        Analyze several PDFs one after another.

        A failure is confined to its own document: it is reported as an
        ErrorResult and the remaining documents are still analyzed.

        Args:
            documents: (file_name, data) pairs in submission order.

        Returns:
            One result per document, in submission order.
        """
        results: list[DocumentResult] = []

        for file_name, data in documents:
            try:
                results.append(self.analyze(data, file_name))
            except AnalysisError as e:
                logger.warning(f"Analysis of {file_name} failed: {e}")
                results.append(ErrorResult(file_name=file_name, error=str(e)))
            except Exception as e:
                logger.error(
                    f"Unexpected error analyzing {file_name}: {e}",
                    exc_info=True,
                )
                results.append(ErrorResult(file_name=file_name, error=str(e)))

        failed = sum(1 for r in results if isinstance(r, ErrorResult))
        logger.info(
            f"Batch complete: {len(results) - failed} analyzed, {failed} failed"
        )
        return results
