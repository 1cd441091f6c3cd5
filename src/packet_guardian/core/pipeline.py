from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .aggregator import aggregate
from .config import DetectionConfig
from .detector import AnomalyDetector
from .models import Alert, Flow, FlowKey, LogRecord
from .parser import LineParser

logger = logging.getLogger(__name__)

NO_PARSABLE_LINES_MESSAGE = (
    "No parsable log lines found. Use the sample format: "
    "SRC=1.2.3.4 DST=5.6.7.8 PROTO=HTTP SIZE=512"
)


class NoParsableLinesError(ValueError):
    """
    Input contained no line any format recognized.

    run() never raises this. Callers that want to tell the user raise it
    after checking DetectionReport.has_records.
    """

    def __init__(self, message: str = NO_PARSABLE_LINES_MESSAGE):
        super().__init__(message)


@dataclass
class DetectionReport:
    records: List[LogRecord] = field(default_factory=list)
    flows: Dict[FlowKey, Flow] = field(default_factory=dict)
    alerts: List[Alert] = field(default_factory=list)
    lines_dropped: int = 0

    @property
    def has_records(self) -> bool:
        return bool(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": len(self.records),
            "lines_dropped": self.lines_dropped,
            "flows": len(self.flows),
            "alert_count": len(self.alerts),
            "alerts": [a.to_dict() for a in self.alerts],
        }


def run_report(
    text: str,
    config: Optional[DetectionConfig] = None,
    parser: Optional[LineParser] = None,
    detector: Optional[AnomalyDetector] = None,
) -> DetectionReport:
    """
    parse -> aggregate -> detect, keeping the intermediate results.

    Every call starts from scratch, nothing is carried between runs.
    """
    parser = parser if parser is not None else LineParser()
    detector = detector if detector is not None else AnomalyDetector(config=config)

    dropped_before = parser.dropped
    records = parser.parse(text)
    flows = aggregate(records)
    alerts = detector.detect(flows)

    report = DetectionReport(
        records=records,
        flows=flows,
        alerts=alerts,
        lines_dropped=parser.dropped - dropped_before,
    )
    logger.info(
        "parsed %d records (%d lines dropped), %d flows, %d alerts",
        len(records),
        report.lines_dropped,
        len(flows),
        len(alerts),
    )
    return report


def run(text: str, config: Optional[DetectionConfig] = None) -> List[Alert]:
    """
    Same as detect(aggregate(parse(text)), config).
    """
    return run_report(text, config=config).alerts
