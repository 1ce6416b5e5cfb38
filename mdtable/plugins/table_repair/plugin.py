# mdtable/plugins/table_repair/plugin.py
"""Table repair plugin for streamed text.

Detects pipe tables in streamed output and repairs them: a missing
delimiter row is inserted and short rows are padded with empty cells so
every row has the same number of columns. Rows that need no change are
emitted exactly as received.

Detection: a run of consecutive lines starting with "|" (after optional
whitespace). A run of a single line is not treated as a table.

Usage:
    from mdtable.plugins.table_repair import create_plugin

    plugin = create_plugin()
    plugin.initialize({"config_path": "mdtable.json"})
    for chunk in stream:
        for output in plugin.process_chunk(chunk):
            display(output)
    for output in plugin.flush():
        display(output)
"""

import re
from typing import Any, Dict, Iterator, List, Optional

from mdtable.config_loader import FormatterConfig, load_config
from mdtable.formatter import CompleteOptions, complete_table
from mdtable.parser import read_table
from mdtable.plugins.protocol import FormatterPlugin
from mdtable.table import TableRow
from mdtable.trace import trace as _trace_write

# Priority for pipeline ordering (20-39 = structural formatting)
DEFAULT_PRIORITY = 22

TABLE_ROW = re.compile(r"^\s*\|")


def _trace(msg: str) -> None:
    _trace_write("TableRepair", msg)


def _indent_delimiter(rows: List[TableRow]) -> None:
    """Give an inserted delimiter row the header's indent and line ending.

    Keeps tables nested in list items intact and CRLF input consistent.
    """
    header, delimiter = rows[0], rows[1]
    line_end = "\r" if header.margin_right.endswith("\r") else ""
    rows[1] = TableRow(delimiter.cells, header.margin_left, line_end)


class TableRepairPlugin:
    """Plugin that completes ragged pipe tables in a text stream.

    Implements the FormatterPlugin protocol. Table lines are buffered
    until a non-table line (or flush) ends the table; partial lines are
    buffered until their newline arrives.
    """

    def __init__(self):
        self._priority = DEFAULT_PRIORITY
        self._options = FormatterConfig().to_complete_options()

        # Lines of the table being accumulated
        self._buffer: List[str] = []

        # Incomplete line (no trailing newline yet)
        self._line_buffer: str = ""

    # ==================== FormatterPlugin Protocol ====================

    @property
    def name(self) -> str:
        """Unique identifier for this formatter."""
        return "table_repair"

    @property
    def priority(self) -> int:
        """Execution priority (22 = structural formatting)."""
        return self._priority

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Process a chunk, buffering table lines until the table ends.

        Args:
            chunk: Incoming text chunk.

        Yields:
            Passed-through text and repaired tables.
        """
        text = self._line_buffer + chunk
        self._line_buffer = ""

        if text and not text.endswith("\n"):
            last_newline = text.rfind("\n")
            if last_newline == -1:
                self._line_buffer = text
                return
            self._line_buffer = text[last_newline + 1:]
            text = text[:last_newline + 1]

        # Text ends with a newline here, so the last element is always ""
        for line in text.split("\n")[:-1]:
            if TABLE_ROW.match(line):
                self._buffer.append(line)
                continue

            yield from self._flush_buffer()
            yield line + "\n"

    def flush(self) -> Iterator[str]:
        """Flush any remaining buffered content."""
        if self._line_buffer:
            partial = self._line_buffer
            self._line_buffer = ""
            if TABLE_ROW.match(partial):
                self._buffer.append(partial)
                yield from self._flush_buffer(trailing_newline=False)
                return
            yield from self._flush_buffer()
            yield partial
            return

        yield from self._flush_buffer()

    def reset(self) -> None:
        """Reset state for a new stream."""
        self._buffer = []
        self._line_buffer = ""

    # ==================== Table Repair ====================

    def _flush_buffer(self, trailing_newline: bool = True) -> Iterator[str]:
        """Emit the buffered table, repaired if it has two or more lines."""
        if not self._buffer:
            return

        lines = self._buffer
        self._buffer = []

        if len(lines) < 2:
            text = lines[0]
        else:
            text = self._repair(lines)

        yield text + "\n" if trailing_newline else text

    def _repair(self, lines: List[str]) -> str:
        table = read_table(lines)
        before = [row.width for row in table.rows]

        completed = complete_table(table, self._options)

        if completed.delimiter_inserted:
            _trace(f"inserted delimiter row into {len(lines)}-line table")
            _indent_delimiter(completed.table.rows)
        after = completed.table.max_width
        if any(width < after for width in before):
            _trace(f"padded rows to {after} cells (widths were {before})")

        return completed.table.to_text()

    # ==================== Configuration ====================

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the formatter with configuration.

        Args:
            config: Dict with optional settings. Completion settings not
                   given here come from the file named by config_path,
                   MDTABLE_CONFIG_PATH or the default locations.
                - priority: Pipeline priority (default: 22)
                - config_path: Path to an mdtable.json/.yaml file
                - delimiter_width: Dashes per synthesized delimiter cell,
                  overriding the loaded configuration
        """
        config = config or {}
        self._priority = config.get("priority", DEFAULT_PRIORITY)

        try:
            formatter_config = load_config(config.get("config_path"))
        except FileNotFoundError:
            formatter_config = FormatterConfig()

        if "delimiter_width" in config:
            self._options = CompleteOptions(delimiter_width=config["delimiter_width"])
        else:
            self._options = formatter_config.to_complete_options()

    def shutdown(self) -> None:
        """Cleanup when plugin is disabled."""
        self.reset()


def create_plugin() -> FormatterPlugin:
    """Factory function to create a TableRepairPlugin instance."""
    return TableRepairPlugin()
