"""
Module entry point for: python -m question_mapper

Allows running the mapper directly as a module:
    python -m question_mapper analyze <pdf_path>... [options]
    python -m question_mapper serve [options]
    python -m question_mapper info <pdf_path>
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
