from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

FlowKey = Tuple[str, str]


@dataclass(frozen=True)
class LogRecord:
    """
    Normalized record that every line format must output.

    This decouples aggregation and detection from the log line syntax.

    Fields:
      source, destination
        Endpoint strings exactly as they appeared in the line.
        No address validation is performed.

      size_bytes
        Packet or transfer size in bytes.

      raw
        The trimmed input line, kept for traceability and export.
    """

    source: str
    destination: str
    size_bytes: int
    raw: str

    def key(self) -> FlowKey:
        """
        Directional flow key. (A, B) and (B, A) are different flows.
        """
        return (self.source, self.destination)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "size_bytes": self.size_bytes,
            "raw": self.raw,
        }


@dataclass
class Flow:
    """
    Sizes and synthetic timestamps observed for one (source, destination) pair
    during a single detection run.

    Both sequences grow only through append, so they always have the same length.
    """

    source: str
    destination: str
    size_sequence: List[int] = field(default_factory=list)
    timestamp_sequence: List[float] = field(default_factory=list)

    def key(self) -> FlowKey:
        return (self.source, self.destination)

    def append(self, size_bytes: int, ts: float) -> None:
        self.size_sequence.append(size_bytes)
        self.timestamp_sequence.append(ts)

    def total_bytes(self) -> int:
        return sum(self.size_sequence)

    def __len__(self) -> int:
        return len(self.size_sequence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "sizes": list(self.size_sequence),
            "timestamps": list(self.timestamp_sequence),
            "total_bytes": self.total_bytes(),
        }


class AlertReason(str, Enum):
    BYTE_THRESHOLD_EXCEEDED = "byte_threshold_exceeded"
    INCREASING_RUN = "increasing_run"


@dataclass(frozen=True)
class Alert:
    """
    One suspicious flow.

    total_bytes is always the whole flow total, even for increasing runs.
    run_length is the configured run length and only feeds the reason label.
    """

    source: str
    destination: str
    total_bytes: int
    reason: AlertReason
    run_length: int = 0

    def key(self) -> FlowKey:
        return (self.source, self.destination)

    def label(self) -> str:
        if self.reason is AlertReason.BYTE_THRESHOLD_EXCEEDED:
            return "bytes > threshold"
        return f"{self.run_length} increasing packets"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "total_bytes": self.total_bytes,
            "reason": self.reason.value,
            "label": self.label(),
        }
