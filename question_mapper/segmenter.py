"""
Page Segmenter
==============
Splits the flat text of a document into one text segment per page.

The split is positional: every page receives the same number of lines
(``ceil(total_lines / page_count)``), and the last pages absorb the
shortfall. Page-break markers in the text are not consulted, so pages with
very uneven line density will have some lines attributed to a neighbour.
"""

from __future__ import annotations

import logging
import math

from .errors import InvalidPageCount

logger = logging.getLogger(__name__)


def split_into_pages(text: str, page_count: int) -> list[str]:
    """
    Partition ``text`` into exactly ``page_count`` segments.

    Args:
        text: Full extracted text of the document.
        page_count: Number of pages reported by the extractor.

    Returns:
        List of ``page_count`` strings. Joining them with newlines
        reproduces the original line sequence; trailing segments may be
        empty when the text has fewer lines than pages.

    Raises:
        InvalidPageCount: If ``page_count`` is zero or negative.
    """
    if page_count <= 0:
        raise InvalidPageCount(page_count)

    lines = text.split("\n")
    lines_per_page = math.ceil(len(lines) / page_count)

    logger.debug(
        f"Segmenting {len(lines)} lines into {page_count} pages "
        f"({lines_per_page} lines per page)"
    )

    return [
        "\n".join(lines[i * lines_per_page:(i + 1) * lines_per_page])
        for i in range(page_count)
    ]
