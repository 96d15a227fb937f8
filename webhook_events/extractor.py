from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from markdown_it.tree import SyntaxTreeNode

from .errors import ExtractionError
from .preprocess import code_spans, first_link, is_heading, table_rows, text_of
from .schema import EventMapping, TableScan, WebhookEvent

logger = logging.getLogger(__name__)

START_MARKER = "About events that trigger workflows"
TABLE_HEADER = "Webhook event payload"

# Triggers documented with a table that has no activity-type semantics.
EXCLUDED_SECTIONS: FrozenSet[str] = frozenset({"schedule", "workflow_call"})


@dataclass
class _WalkState:
    active: bool = False
    section: str = ""
    events: List[WebhookEvent] = field(default_factory=list)

    def add(self, types: List[str]) -> None:
        if not self.section:
            raise ExtractionError(f'"{TABLE_HEADER}" table was found before any hook heading')
        if any(e.name == self.section for e in self.events):
            raise ExtractionError(
                f'more than one "{TABLE_HEADER}" table was found for hook {self.section!r}'
            )
        self.events.append(WebhookEvent(name=self.section, types=types))


class TableExtractor:
    """
    Walks a parsed events document and collects the activity types of each trigger.

    Only top-level nodes after the start marker heading are considered. Each
    level-2 heading opens a section; the first qualifying table in a section
    provides that trigger's types.
    """

    def __init__(
        self,
        start_marker: str = START_MARKER,
        excluded: FrozenSet[str] = EXCLUDED_SECTIONS,
    ):
        self.start_marker = start_marker
        self.excluded = excluded

    def extract(self, tree: SyntaxTreeNode) -> EventMapping:
        state = _WalkState()
        for node in tree.children:
            self._visit(node, state)

        if not state.active:
            raise ExtractionError(f'"## {self.start_marker}" heading was missing')
        if not state.events:
            raise ExtractionError("no webhook table was found in given markdown source")
        return EventMapping(events=state.events)

    def _visit(self, node: SyntaxTreeNode, state: _WalkState) -> None:
        if not state.active:
            if is_heading(node, 2) and text_of(node) == self.start_marker:
                state.active = True
                logger.debug("Found %r heading", self.start_marker)
            return

        if is_heading(node, 2):
            state.section = text_of(node)
            logger.debug("Found new hook %r", state.section)
            return

        if node.type != "table":
            return

        if state.section in self.excluded:
            logger.debug("Skip table under excluded hook %r", state.section)
            return

        scan = self.examine_table(node)
        if scan.qualifying:
            state.add(scan.types)

    def examine_table(self, table: SyntaxTreeNode) -> TableScan:
        """
        Read the activity types from a "Webhook event payload" table.

        Tables with another header are not qualifying. Only the first body row
        is read. Raises ExtractionError when the table qualifies but its name
        cell carries no link.
        """
        logger.debug("Table: %s", text_of(table))

        saw_header = False
        for is_header, row in table_rows(table):
            cells = row.children
            if is_header:
                saw_header = True
                if not cells or text_of(cells[0]) != TABLE_HEADER:
                    logger.debug("  Skip this table because it is not for %s", TABLE_HEADER)
                    return TableScan(qualifying=False)
                logger.debug("  Found table header for %s", TABLE_HEADER)
                continue

            if not saw_header:
                # markdown tables cannot have body rows without a header row
                logger.debug("  Skip this table because it does not have a header")
                return TableScan(qualifying=False)

            link = first_link(cells[0])
            if link is None:
                raise ExtractionError(
                    f'"{TABLE_HEADER}" table was found, but first cell did not contain '
                    f"hook name: {text_of(cells[0])!r}"
                )
            name = text_of(link)
            types = code_spans(cells[1]) if len(cells) > 1 else []
            logger.debug("  Found Webhook table: %r %s", name, types)
            return TableScan(qualifying=True, types=types, name=name)

        logger.debug("  Table row was not found (saw_header=%s)", saw_header)
        return TableScan(qualifying=False)


def extract(tree: SyntaxTreeNode) -> Dict[str, List[str]]:
    """Extract the event mapping from tree as an insertion-ordered dict."""
    return TableExtractor().extract(tree).as_dict()
