from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

import requests
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .errors import FetchError, SourceError

logger = logging.getLogger(__name__)

# Leaf node types whose literal content makes up the visible text of a node.
# Code spans count: headings like "## `push`" are named by their code span.
TEXT_TYPES = frozenset({"text", "text_special", "code_inline"})


def _markdown_parser() -> MarkdownIt:
    # Tables are a GFM extension, off in the commonmark preset.
    return MarkdownIt("commonmark").enable("table")


@dataclass
class MarkdownPreprocessor:
    """
    Loads a markdown document and turns it into a navigable syntax tree.
    """

    timeout: float = 30.0
    parser: MarkdownIt = field(default_factory=_markdown_parser)

    def fetch(self, url: str) -> bytes:
        """Download the raw document. Any non-2xx status is an error."""
        logger.debug("Fetching %s", url)
        try:
            res = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"could not fetch {url}: {exc}") from exc
        if not 200 <= res.status_code < 300:
            raise FetchError(
                f"request was not successful for {url}: {res.status_code} {res.reason}"
            )
        body = res.content
        logger.debug("Fetched %d bytes from %s", len(body), url)
        return body

    def read(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise SourceError(f"could not read {path}: {exc}") from exc

    def parse(self, source: Union[bytes, str]) -> SyntaxTreeNode:
        if isinstance(source, bytes):
            try:
                source = source.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise SourceError(f"markdown source is not valid UTF-8: {exc}") from exc
        return SyntaxTreeNode(self.parser.parse(source))


def text_of(node: SyntaxTreeNode) -> str:
    """
    Concatenate every text run below node in document order.

    Emphasis markers split a single word into several runs ("pull_request" can
    arrive as "pull_" and "request"), so all of them must be collected.
    """
    return "".join(n.content for n in node.walk() if n.type in TEXT_TYPES)


def first_link(node: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    for n in node.walk():
        if n.type == "link":
            return n
    return None


def code_spans(node: SyntaxTreeNode) -> List[str]:
    return [n.content for n in node.walk() if n.type == "code_inline"]


def is_heading(node: SyntaxTreeNode, level: int) -> bool:
    return node.type == "heading" and node.tag == f"h{level}"


def table_rows(table: SyntaxTreeNode) -> Iterator[tuple[bool, SyntaxTreeNode]]:
    """
    Yield (is_header, row) for each row of a table node, top to bottom.

    markdown-it groups rows under thead/tbody; callers only care about the
    header row followed by the body rows.
    """
    for section in table.children:
        for row in section.children:
            if row.type == "tr":
                yield section.type == "thead", row
