"""
Core pipeline: parse -> aggregate -> detect.

Keep line syntax out of this package, it belongs to packet_guardian.formats.
"""

from .models import Alert, AlertReason, Flow, FlowKey, LogRecord
from .config import ConfigurationError, DetectionConfig
from .parser import LineParser, parse
from .aggregator import aggregate
from .detector import AnomalyDetector, detect
from .pipeline import DetectionReport, NoParsableLinesError, run, run_report
from .server import PacketGuardianMCPServer

__all__ = [
    "Alert",
    "AlertReason",
    "Flow",
    "FlowKey",
    "LogRecord",
    "ConfigurationError",
    "DetectionConfig",
    "LineParser",
    "parse",
    "aggregate",
    "AnomalyDetector",
    "detect",
    "DetectionReport",
    "NoParsableLinesError",
    "run",
    "run_report",
    "PacketGuardianMCPServer",
]
