from pathlib import Path
from typing import Iterable, List, Optional
import logging

from .. import __version__
from ..config import Config
from ..io.corpus_writer import write_document
from ..io.pdf_loader import PDFLoader
from ..models import CleanedDocument
from ..preprocess.normalizer import PageTextNormalizer

logger = logging.getLogger(__name__)


class Pipeline:
    """
    High-level orchestrator.

    - extract page texts from PDF
    - normalize each page
    - optionally write the cleaned document
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

        self.pdf_loader = PDFLoader(
            min_page_length=self.config.extraction.min_page_length
        )

        self.normalizer = PageTextNormalizer(
            footer_marker=self.config.normalizer.footer_marker,
            max_page_digits=self.config.normalizer.max_page_digits,
        )

    def process(
        self,
        pdf_path: Path,
        output_path: Optional[Path] = None
    ) -> CleanedDocument:
        pdf_path = Path(pdf_path)
        document = self.pdf_loader.load(pdf_path)

        result = self.normalizer.normalize_document(document)
        result.metadata = {
            "pipeline_version": __version__,
            "num_pages": result.page_count,
            "num_empty_pages": sum(1 for page in result.pages if not page.text.strip()),
        }

        logger.info(
            "Cleaned %s: %d pages (%d empty)",
            result.doc_id,
            result.metadata["num_pages"],
            result.metadata["num_empty_pages"],
        )

        if output_path is not None:
            write_document(result, output_path, fmt=self.config.output_format)

        return result

    def process_many(
        self,
        pdf_paths: Iterable[Path],
        output_dir: Optional[Path] = None,
    ) -> List[CleanedDocument]:
        """
        Process PDFs sequentially, keeping input order.

        With output_dir, each document is written to
        <output_dir>/<stem>.<output_format>.
        """
        results: List[CleanedDocument] = []
        for pdf_path in pdf_paths:
            pdf_path = Path(pdf_path)
            output_path = None
            if output_dir is not None:
                output_path = Path(output_dir) / f"{pdf_path.stem}.{self.config.output_format}"
            results.append(self.process(pdf_path, output_path=output_path))

        logger.info("Processed %d documents", len(results))
        return results

    def run(self, pdf_path: str) -> CleanedDocument:
        return self.process(Path(pdf_path))
