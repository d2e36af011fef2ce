"""
Text Extractor
==============
Flattens a PDF into plain text using PyMuPDF (fitz).

Layout, fonts and images are ignored: the analysis only needs the text in
extraction order and the number of pages the document reports.
"""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from .errors import ExtractionFailure
from .models import DocumentInfo, ExtractedText

logger = logging.getLogger(__name__)

# Written before every page's text in the flat output
PAGE_SEPARATOR = "\n\n"


class TextExtractor:
    """
    Handles PDF ingestion for the analyzer.

    Extracts:
        - The text of every page, concatenated in page order
        - The page count reported by the document
    """

    def extract(self, data: bytes) -> ExtractedText:
        """
        Extract the flat text of a PDF held in memory.

        Args:
            data: Raw bytes of the PDF file.

        Returns:
            ExtractedText with the concatenated page texts and page count.

        Raises:
            ExtractionFailure: If the bytes are not a readable PDF, or the
                document is password protected.
        """
        with self._open(data) as doc:
            if doc.needs_pass:
                raise ExtractionFailure("Document is encrypted")

            try:
                parts = [PAGE_SEPARATOR + page.get_text() for page in doc]
            except Exception as e:
                raise ExtractionFailure(f"Failed to read PDF text: {e}") from e

            page_count = doc.page_count

        text = "".join(parts)
        logger.info(
            f"Extracted {len(text)} characters from {page_count} pages"
        )
        return ExtractedText(text=text, page_count=page_count)

    def get_info(self, data: bytes) -> DocumentInfo:
        """Get page count and non-empty metadata fields of the PDF."""
        with self._open(data) as doc:
            metadata = {
                key: value
                for key, value in (doc.metadata or {}).items()
                if value
            }
            return DocumentInfo(page_count=doc.page_count, metadata=metadata)

    def _open(self, data: bytes) -> fitz.Document:
        try:
            return fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise ExtractionFailure(f"Failed to open PDF: {e}") from e
