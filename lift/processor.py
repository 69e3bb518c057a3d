"""Main pipeline - scan, order, render and optionally index."""

import logging
from dataclasses import dataclass
from pathlib import Path

from lift.config import Settings
from lift.documents import DocumentProcessor, OrderedDocuments
from lift.errors import LiftError, ProcessingError
from lift.output import GeneratedOutputs, OutputGenerator
from lift.scanner import DirectoryScanner, PathMatcher
from lift.storage import AggregateIndex, IndexGenerator

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """What a run produced. Empty when no documents were found."""

    files_found: int = 0
    ordered: OrderedDocuments | None = None
    outputs: GeneratedOutputs | None = None
    aggregate: AggregateIndex | None = None


class LiftProcessor:
    """Wires the scanner, document processor and generators together."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.input_dir = Path(settings.input_path).resolve()
        self.output_dir = Path(settings.output_path).resolve()

        self.matcher = PathMatcher(
            exclude_patterns=settings.exclude_patterns,
            include_globs=settings.include_globs,
            exclude_globs=settings.exclude_globs,
        )
        self.scanner = DirectoryScanner(self.matcher)
        self.documents = DocumentProcessor(self.input_dir)
        self.output = OutputGenerator(self.output_dir)

        self.index_generator: IndexGenerator | None = None
        if settings.generate_index:
            self.index_generator = IndexGenerator(
                self.input_dir,
                self.output_dir,
                is_excluded=self.matcher.is_excluded,
                is_document_file=self.matcher.is_document_file,
            )

    def process(self) -> ProcessResult:
        """Run the whole pipeline once."""
        try:
            return self._process()
        except LiftError as e:
            raise ProcessingError(f"Processing failed: {e}") from e

    def _process(self) -> ProcessResult:
        files = self.scanner.scan(self.input_dir)

        if not files:
            logger.info("No document files found.")
            return ProcessResult()

        logger.info(f"Scanned input: {self.input_dir.name} ({len(files)} files)")

        documents = self.documents.process_files(files)
        ordered = self.documents.order(documents)

        outputs = self.output.generate(self.input_dir.name, ordered)
        result = ProcessResult(files_found=len(files), ordered=ordered, outputs=outputs)

        if self.index_generator is not None:
            logger.info("Generating index.json files...")
            result.aggregate = self.index_generator.generate_all()
            logger.info("✔ index.json files generated")

        return result
