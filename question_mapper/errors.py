"""
Errors
======
Document-scoped failures raised by the analysis pipeline.

None of these is fatal to a batch: the engine converts them into
per-document error results. A page without a printed number or without
question markers is not an error.
"""


class AnalysisError(Exception):
    """Base class for failures that abort the analysis of one document."""


class ExtractionFailure(AnalysisError):
    """The PDF could not be opened or its text could not be read."""


class InvalidPageCount(AnalysisError):
    """The reported page count cannot be used for segmentation."""

    def __init__(self, page_count: int):
        self.page_count = page_count
        super().__init__(f"Invalid page count: {page_count}")
