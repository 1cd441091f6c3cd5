from __future__ import annotations
import time
from typing import Dict, Iterable, Optional

from .models import Flow, FlowKey, LogRecord


def aggregate(
    records: Iterable[LogRecord], run_start: Optional[float] = None
) -> Dict[FlowKey, Flow]:
    """
    Group records into directional flows in one pass.

    Timestamps are synthetic. Log lines carry no reliable per record time,
    so record i of a flow gets run_start + i. run_start is read once per call,
    never per record, so ordering inside a run is deterministic.

    The returned dict keeps first seen order and holds only this run's flows.
    """
    start = time.time() if run_start is None else float(run_start)
    flows: Dict[FlowKey, Flow] = {}

    for r in records:
        key = r.key()
        flow = flows.get(key)
        if flow is None:
            flow = Flow(source=r.source, destination=r.destination)
            flows[key] = flow
        flow.append(r.size_bytes, start + len(flow))

    return flows
