"""Trace logging to a file.

Plugins write short diagnostic lines here instead of the console, since
console output is the stream being formatted.

The trace file is taken from MDTABLE_TRACE_LOG. Tracing is off when the
variable is unset or empty.

Usage:
    from mdtable.trace import trace

    trace("TableRepair", "inserted delimiter row")
"""

import os
from datetime import datetime
from typing import Optional, Set

TRACE_ENV_VAR = "MDTABLE_TRACE_LOG"

# Directories already created, to avoid os.makedirs on every write
_ensured_dirs: Set[str] = set()


def _ensure_parent_dirs(file_path: str) -> None:
    """Create parent directories for a file path if they don't exist."""
    parent = os.path.dirname(os.path.abspath(file_path))
    if parent not in _ensured_dirs:
        os.makedirs(parent, exist_ok=True)
        _ensured_dirs.add(parent)


def resolve_trace_path() -> Optional[str]:
    """Return the MDTABLE_TRACE_LOG path, or None when tracing is off."""
    return os.environ.get(TRACE_ENV_VAR) or None


def trace_write(component: str, msg: str, trace_path: Optional[str]) -> None:
    """Append a trace line to ``trace_path``.

    Never raises; a broken trace file must not break formatting.

    Args:
        component: Component name for the log prefix.
        msg: Message to write.
        trace_path: File to append to. If None, does nothing.
    """
    if not trace_path:
        return
    try:
        _ensure_parent_dirs(trace_path)
        with open(trace_path, "a", encoding="utf-8") as f:
            ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            f.write(f"[{ts}] [{component}] {msg}\n")
    except (OSError, ValueError):
        # ValueError: embedded NUL in the path
        pass


def trace(component: str, msg: str) -> None:
    """Write a trace message to the MDTABLE_TRACE_LOG file."""
    trace_write(component, msg, resolve_trace_path())
