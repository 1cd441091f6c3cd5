"""
packet_guardian

Heuristic detector for suspicious network flows in free-text logs.

Core ideas
1. Line formats turn raw text lines into LogRecord
2. The aggregator groups records into directional flows
3. The detector applies ordered rules and emits at most one Alert per flow
"""

__all__ = ["core", "formats", "cli", "samples"]
