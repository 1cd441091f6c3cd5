from __future__ import annotations
import re
from typing import Optional

from packet_guardian.core.format_base import LineFormat
from packet_guardian.core.models import LogRecord

# Matches anywhere in the line, so a leading "[2025-11-04 09:00:12]" is allowed.
BRACKETED_PATTERN = re.compile(
    r"SRC=(\S+)\s+DST=(\S+)\s+PROTO=\S+\s+SIZE=([0-9]+)", re.IGNORECASE
)


class BracketedFormat:
    """
    Firewall style key=value lines:

      [2025-11-04 09:00:12] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=512

    Field names are case insensitive and must appear in SRC, DST, PROTO, SIZE order.
    The timestamp and PROTO value are not kept.
    """

    name = "bracketed"

    def match(self, line: str) -> Optional[LogRecord]:
        m = BRACKETED_PATTERN.search(line)
        if not m:
            return None
        src, dst, size = m.groups()
        return LogRecord(source=src, destination=dst, size_bytes=int(size), raw=line)


def build_format() -> LineFormat:
    return BracketedFormat()
