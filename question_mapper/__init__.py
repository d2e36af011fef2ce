"""
PDF Question Mapper
===================
Maps each page of an uploaded PDF to its printed page number and to the
question markers found on it.

Architecture:
    - Text Extractor: Flattens a PDF into plain text plus a page count
    - Page Segmenter: Splits the flat text into one segment per page
    - Page-Number Recognizer: Recovers printed page numbers from boundary lines
    - Question Detector: Collects question markers ("Q1", "Question 2", ...)
    - Sequence Assembler: Builds the per-page summary returned to callers

Version: 1.0.0
"""

__version__ = "1.0.0"
