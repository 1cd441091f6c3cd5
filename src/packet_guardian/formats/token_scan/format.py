from __future__ import annotations
from typing import List, Optional

from packet_guardian.core.format_base import LineFormat
from packet_guardian.core.models import LogRecord


def _find_value(tokens: List[str], prefix: str) -> Optional[str]:
    """
    Value of the first token starting with prefix, up to the next "=".
    """
    for tok in tokens:
        if tok.startswith(prefix):
            value = tok.split("=")[1]
            return value or None
    return None


class TokenScanFormat:
    """
    Permissive fallback.

    Splits the line on whitespace and looks for SRC=, DST= and SIZE= tokens
    in any order, so lines like

      host=fw01 SIZE=900 action=allow DST=10.0.0.9 SRC=10.0.0.4

    still produce a record. A SIZE value that is not all digits drops the line,
    the same way the stricter formats would.
    """

    name = "token_scan"

    def match(self, line: str) -> Optional[LogRecord]:
        tokens = line.split()
        src = _find_value(tokens, "SRC=")
        dst = _find_value(tokens, "DST=")
        size = _find_value(tokens, "SIZE=")

        if not (src and dst and size):
            return None
        if not (size.isascii() and size.isdigit()):
            return None

        return LogRecord(source=src, destination=dst, size_bytes=int(size), raw=line)


def build_format() -> LineFormat:
    return TokenScanFormat()
