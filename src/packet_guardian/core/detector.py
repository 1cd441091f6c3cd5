from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from .config import DetectionConfig
from .models import Alert, AlertReason, Flow, FlowKey

logger = logging.getLogger(__name__)


def find_increasing_run(sizes: Sequence[int], run_length: int) -> Optional[int]:
    """
    Start index of the first window of run_length strictly increasing sizes.
    None if there is no such window.
    """
    if run_length < 2 or len(sizes) < run_length:
        return None

    for i in range(len(sizes) - run_length + 1):
        if all(sizes[i + j] < sizes[i + j + 1] for j in range(run_length - 1)):
            return i
    return None


class DetectionRule(Protocol):
    """
    One alert condition. Returns an Alert for the flow or None.
    """

    name: str

    def evaluate(self, flow: Flow, total_bytes: int, config: DetectionConfig) -> Optional[Alert]:
        ...


class ByteThresholdRule:
    name = "byte_threshold"

    def evaluate(self, flow: Flow, total_bytes: int, config: DetectionConfig) -> Optional[Alert]:
        if total_bytes < config.byte_threshold:
            return None
        return Alert(
            source=flow.source,
            destination=flow.destination,
            total_bytes=total_bytes,
            reason=AlertReason.BYTE_THRESHOLD_EXCEEDED,
        )


class IncreasingRunRule:
    name = "increasing_run"

    def evaluate(self, flow: Flow, total_bytes: int, config: DetectionConfig) -> Optional[Alert]:
        n = config.increasing_run_length
        if find_increasing_run(flow.size_sequence, n) is None:
            return None
        return Alert(
            source=flow.source,
            destination=flow.destination,
            total_bytes=total_bytes,
            reason=AlertReason.INCREASING_RUN,
            run_length=n,
        )


def default_rules() -> List[DetectionRule]:
    # Order is precedence.
    return [ByteThresholdRule(), IncreasingRunRule()]


class AnomalyDetector:
    """
    Applies an ordered rule list to every flow.

    Main concepts:
      rules
        Evaluated in list order, the first rule that fires wins.
        New rules are appended so existing precedence is unchanged.

      config
        Thresholds shared by all rules. time_window_seconds is carried
        but not used, totals cover the whole flow.

    Flows are visited in sorted (source, destination) order so output is reproducible.
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        rules: Optional[List[DetectionRule]] = None,
    ):
        self.config = config if config is not None else DetectionConfig()
        self.rules = rules if rules is not None else default_rules()

    def configure(
        self,
        time_window_seconds: Optional[int] = None,
        byte_threshold: Optional[int] = None,
        increasing_run_length: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Update detection parameters at runtime.
        Exposed as an MCP tool by the server. Raises ConfigurationError on bad values
        and leaves the current config untouched.
        """
        self.config = self.config.updated(
            time_window_seconds=time_window_seconds,
            byte_threshold=byte_threshold,
            increasing_run_length=increasing_run_length,
        )
        return self.config.as_dict()

    def evaluate(self, flow: Flow) -> Optional[Alert]:
        total = flow.total_bytes()
        for rule in self.rules:
            alert = rule.evaluate(flow, total, self.config)
            if alert is not None:
                logger.debug("%s fired for %s -> %s", rule.name, flow.source, flow.destination)
                return alert
        return None

    def detect(self, flows: Mapping[FlowKey, Flow]) -> List[Alert]:
        alerts: List[Alert] = []

        for key in sorted(flows):
            alert = self.evaluate(flows[key])
            if alert is not None:
                alerts.append(alert)

        logger.debug("evaluated %d flows, %d alerts", len(flows), len(alerts))
        return alerts


def detect(
    flows: Mapping[FlowKey, Flow], config: Optional[DetectionConfig] = None
) -> List[Alert]:
    return AnomalyDetector(config=config).detect(flows)
