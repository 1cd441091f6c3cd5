import pytest

from packet_guardian.core.config import DetectionConfig
from packet_guardian.core.detector import AnomalyDetector
from packet_guardian.core.models import Flow
from packet_guardian.core.parser import LineParser


@pytest.fixture
def config():
    return DetectionConfig(time_window_seconds=60, byte_threshold=1_000_000, increasing_run_length=3)

@pytest.fixture
def parser():
    return LineParser()

@pytest.fixture
def detector(config):
    return AnomalyDetector(config=config)

@pytest.fixture
def make_flow():
    def _make(sizes, src="10.0.0.1", dst="10.0.0.2"):
        flow = Flow(source=src, destination=dst)
        for i, size in enumerate(sizes):
            flow.append(size, 1000.0 + i)
        return flow
    return _make

@pytest.fixture
def run_start():
    return 1_700_000_000.0
