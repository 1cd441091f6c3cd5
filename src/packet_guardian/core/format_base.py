from __future__ import annotations

from typing import Optional, Protocol

from .models import LogRecord


class LineFormat(Protocol):
    """
    Required interface for a line format plugin.

    A line format is responsible for
    1. Recognizing one textual layout of a flow log line
    2. Extracting source, destination and size from it
    3. Returning a LogRecord, or None when the line is not in its layout

    The parser never imports specific formats directly.
    It loads them via registry using import paths.
    """

    name: str

    def match(self, line: str) -> Optional[LogRecord]:
        """
        Called with one trimmed, non-empty line. Must never raise.
        """
        ...
