from __future__ import annotations
import re
from typing import Optional

from packet_guardian.core.format_base import LineFormat
from packet_guardian.core.models import LogRecord

# Exactly three comma separated fields, nothing around them.
CSV_PATTERN = re.compile(r"^([^\s,]+),([^\s,]+),([0-9]+)$")


class CsvLineFormat:
    """
    Bare "source,destination,size" lines such as 10.0.0.1,10.0.0.2,1500.

    A line with a fourth field or surrounding text falls through to the next format.
    """

    name = "csv_line"

    def match(self, line: str) -> Optional[LogRecord]:
        m = CSV_PATTERN.match(line)
        if not m:
            return None
        src, dst, size = m.groups()
        return LogRecord(source=src, destination=dst, size_bytes=int(size), raw=line)


def build_format() -> LineFormat:
    return CsvLineFormat()
