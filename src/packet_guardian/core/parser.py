from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional

from .config import DEFAULT_LINE_FORMATS
from .models import LogRecord
from .registry import LineFormatRegistry

logger = logging.getLogger(__name__)


def default_registry() -> LineFormatRegistry:
    reg = LineFormatRegistry()
    reg.load_from_import_paths(DEFAULT_LINE_FORMATS)
    return reg


class LineParser:
    """
    Turns raw log text into LogRecord objects.

    Formats are tried in registry order and the first match wins.
    Lines that no format recognizes are dropped and counted, they are not errors.
    """

    def __init__(self, registry: Optional[LineFormatRegistry] = None):
        self.registry = registry if registry is not None else default_registry()
        self.dropped = 0

    def parse_line(self, line: str) -> Optional[LogRecord]:
        for fmt in self.registry.ordered():
            record = fmt.match(line)
            if record is not None:
                return record
        return None

    def iter_records(self, lines: Iterable[str]) -> Iterator[LogRecord]:
        """
        Single pass generator over lines, in input order.
        """
        for raw in lines:
            line = raw.strip()
            if not line:
                continue

            record = self.parse_line(line)
            if record is None:
                self.dropped += 1
                logger.debug("no line format matched: %r", line)
                continue
            yield record

    def parse(self, text: str) -> List[LogRecord]:
        return list(self.iter_records(text.split("\n")))


def parse(text: str) -> List[LogRecord]:
    return LineParser().parse(text)
