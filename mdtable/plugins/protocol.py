"""Protocol for streaming formatter plugins.

Formatter plugins receive output text chunk by chunk. For each chunk a
plugin either passes it through, buffers it, or emits transformed text
once it has seen enough (for example, a complete table).
"""

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class FormatterPlugin(Protocol):
    """Protocol for streaming formatter plugins."""

    @property
    def name(self) -> str:
        """Unique identifier for this formatter."""
        ...

    @property
    def priority(self) -> int:
        """Execution priority. Lower values run first.

        Suggested ranges:
        - 0-19: Pre-processing (normalization, encoding fixes)
        - 20-39: Structural formatting (tables)
        - 40-59: Syntax highlighting
        - 60-99: Post-processing
        """
        ...

    def process_chunk(self, chunk: str) -> Iterator[str]:
        """Process an incoming chunk, yielding zero or more output chunks."""
        ...

    def flush(self) -> Iterator[str]:
        """Emit any buffered content at end of stream."""
        ...

    def reset(self) -> None:
        """Clear internal state before a new stream."""
        ...
