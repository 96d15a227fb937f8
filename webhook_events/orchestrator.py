from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .codegen import format_source, render_module
from .config import GeneratorConfig
from .errors import EmitError
from .extractor import TableExtractor
from .preprocess import MarkdownPreprocessor
from .schema import EventMapping

logger = logging.getLogger(__name__)

STDOUT = "-"


@dataclass
class GenerationResult:
    mapping: EventMapping
    source: str
    destination: str


class WebhookEventsGenerator:
    """
    Coordinates acquiring the events document, extracting the table and writing the module.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        preprocessor: MarkdownPreprocessor | None = None,
        extractor: TableExtractor | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.preprocessor = preprocessor or MarkdownPreprocessor(timeout=self.config.timeout)
        self.extractor = extractor or TableExtractor()

    def acquire(self, src_path: Path | None = None) -> bytes:
        """
        Read the local copy when given, otherwise fetch the configured URL.
        """
        if src_path is not None:
            logger.debug("Reading %s", src_path)
            return self.preprocessor.read(src_path)
        return self.preprocessor.fetch(self.config.source_url)

    def extract(self, source: bytes | str) -> EventMapping:
        tree = self.preprocessor.parse(source)
        return self.extractor.extract(tree)

    def render(self, mapping: EventMapping) -> str:
        return format_source(
            render_module(
                mapping,
                source_url=self.config.source_url,
                tool_name=self.config.tool_name,
                variable_name=self.config.variable_name,
            )
        )

    def generate(self, source: bytes | str) -> str:
        """
        Turn raw markdown into the formatted module text.

        Nothing is written here, so a failure never leaves partial output behind.
        """
        return self.render(self.extract(source))

    def write(self, text: str, destination: str | None, stdout: Optional[TextIO] = None) -> str:
        """
        Write text to destination, or to stdout when destination is None or "-".

        Returns a label for the destination used in logs.
        """
        if destination is None or destination == STDOUT:
            out = stdout if stdout is not None else sys.stdout
            try:
                out.write(text)
            except OSError as exc:
                raise EmitError(f"could not write output: {exc}") from exc
            return "stdout"

        path = Path(destination)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise EmitError(f"could not write output: {exc}") from exc
        return str(path)

    def run(
        self,
        src_path: Path | None = None,
        destination: str | None = None,
        stdout: Optional[TextIO] = None,
    ) -> GenerationResult:
        source = self.acquire(src_path)
        mapping = self.extract(source)
        logger.info("Extracted %d webhook events", len(mapping))
        text = self.render(mapping)
        written = self.write(text, destination, stdout)
        logger.debug("Wrote output to %s", written)
        return GenerationResult(
            mapping=mapping,
            source=str(src_path) if src_path is not None else self.config.source_url,
            destination=written,
        )
