"""
Data Models
===========
Pydantic models for the per-document analysis output.
All models serialize with camelCase keys, the shape the web frontend reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Base model that accepts snake_case and dumps camelCase by default."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def model_dump(self, **kwargs):
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs):
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(**kwargs)


# ─── Extraction ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ExtractedText:
    """Flat text of one document plus the page count the PDF reports."""
    text: str
    page_count: int


@dataclass(frozen=True)
class DocumentInfo:
    """Page count and document metadata (title, author, ...) of a PDF."""
    page_count: int
    metadata: dict[str, str] = field(default_factory=dict)


# ─── Result Models ────────────────────────────────────────────────────────────


class PageSummaryEntry(_CamelModel):
    """
    Summary of a single logical page.

    ``printed_page`` holds the recognized printed number, or the 1-based
    logical index when none was found.
    """
    printed_page: int
    range: Optional[str] = Field(
        default=None,
        description='"<min>-<max>" over question_starts, null when empty',
    )
    question_starts: list[int] = Field(default_factory=list)


class AnalysisResult(_CamelModel):
    """
    Complete output for one document.
    This is the object placed in the ``results`` array of the API response.
    """
    file_name: str
    total_pages: int = Field(ge=0)
    printed_page_sequence: list[int] = Field(default_factory=list)
    page_summary: list[PageSummaryEntry] = Field(default_factory=list)


class ErrorResult(AnalysisResult):
    """Placeholder result for a document that could not be analyzed."""
    error: str
    total_pages: int = 0


DocumentResult = Union[ErrorResult, AnalysisResult]


class BatchResponse(_CamelModel):
    """Results of a batch, in submission order."""
    results: list[DocumentResult] = Field(default_factory=list)
