"""
Script to extract and clean page text from PDF files.

Usage:
    python scripts/clean_pdf.py --pdf path/to/a.pdf path/to/b.pdf --format csv
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pdf_page_cleaner.config import Config
from pdf_page_cleaner.io import PDFLoadError, write_corpus_csv
from pdf_page_cleaner.pipeline import Pipeline
from pdf_page_cleaner.utils import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract and normalize per-page PDF text"
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        nargs="+",
        required=True,
        help="Path(s) to input PDF file(s)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Output directory (default: config output_dir)"
    )
    parser.add_argument(
        "--format",
        choices=["json", "txt", "csv"],
        help="Output format (default: config output_format)"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    missing = [pdf for pdf in args.pdf if not pdf.exists()]
    if missing:
        for pdf in missing:
            print(f"Error: PDF file not found: {pdf}")
        sys.exit(1)

    config = Config()
    if args.format:
        config.output_format = args.format

    output_dir = args.output_dir or Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    pipeline = Pipeline(config=config)

    try:
        if config.output_format == "csv":
            # All pages of all documents go into one corpus table
            results = pipeline.process_many(args.pdf)
            corpus_path = write_corpus_csv(results, output_dir / "corpus.csv")
        else:
            results = pipeline.process_many(args.pdf, output_dir=output_dir)
            corpus_path = None
    except PDFLoadError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("-" * 60)
    print("RESULTS:")
    for result in results:
        print(
            f"  {result.doc_id}: {result.metadata['num_pages']} pages "
            f"({result.metadata['num_empty_pages']} empty)"
        )

    if corpus_path is not None:
        print(f"\nCorpus saved to: {corpus_path}")
    else:
        print(f"\nOutput saved to: {output_dir}")


if __name__ == "__main__":
    main()
