from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .config import DetectionConfig
from .detector import AnomalyDetector
from .formatter import to_csv
from .parser import LineParser
from .pipeline import NoParsableLinesError, run_report
from .registry import LineFormatRegistry
from ..samples import SAMPLE_LOG

logger = logging.getLogger(__name__)


class PacketGuardianMCPServer:
    """
    MCP server in front of the detection pipeline.

    Responsibilities:
      Load configured line formats
      Hold the active detection config
      Expose parse, detect and export as tools

    Each tool call runs the pipeline from scratch on the text it is given.
    Only the thresholds persist between calls.
    """

    def __init__(
        self,
        format_imports: List[str],
        config: Optional[DetectionConfig] = None,
    ):
        self.registry = LineFormatRegistry()
        self.detector = AnomalyDetector(config=config)
        self.mcp = FastMCP("packet_guardian")

        self._load_formats(format_imports)
        self._register_tools()

    def _log(self, msg: str) -> None:
        logger.info(msg)

    def _load_formats(self, imports: List[str]) -> None:
        self.registry.load_from_import_paths(imports)
        self._log(f"line formats loaded: {', '.join(self.registry.list())}")

    def detect_flows(self, text: str) -> Dict[str, Any]:
        report = run_report(text, parser=LineParser(self.registry), detector=self.detector)
        if not report.has_records:
            raise NoParsableLinesError()
        out = report.to_dict()
        out["config"] = self.detector.config.as_dict()
        return out

    def export_report(self, text: str) -> str:
        report = run_report(text, parser=LineParser(self.registry), detector=self.detector)
        if not report.has_records:
            raise NoParsableLinesError()
        return to_csv(report.alerts)

    def _register_tools(self) -> None:
        @self.mcp.tool()
        def list_line_formats() -> List[str]:
            return self.registry.list()

        @self.mcp.tool()
        def set_thresholds(
            time_window_seconds: Optional[int] = None,
            byte_threshold: Optional[int] = None,
            increasing_run_length: Optional[int] = None,
        ) -> Dict[str, Any]:
            return self.detector.configure(
                time_window_seconds=time_window_seconds,
                byte_threshold=byte_threshold,
                increasing_run_length=increasing_run_length,
            )

        @self.mcp.tool()
        def parse_logs(text: str) -> List[Dict[str, Any]]:
            parser = LineParser(self.registry)
            return [r.to_dict() for r in parser.parse(text)]

        @self.mcp.tool()
        def detect_flows(text: str) -> Dict[str, Any]:
            return self.detect_flows(text)

        @self.mcp.tool()
        def export_report(text: str) -> str:
            return self.export_report(text)

        @self.mcp.tool()
        def sample_logs() -> str:
            return SAMPLE_LOG

    def run(self) -> None:
        self.mcp.run()
