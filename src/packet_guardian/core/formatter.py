"""Alert output: one text line per alert and a CSV report."""

from __future__ import annotations
import csv
import io
from typing import Iterable, List

from .models import Alert

REPORT_FILENAME = "packet-guardian-report.csv"
CSV_HEADER = ["Source", "Destination", "Bytes", "Reason"]
NO_ALERTS_MESSAGE = "No suspicious flows detected."


def format_alert(alert: Alert) -> str:
    return (
        f"ALERT: {alert.source} → {alert.destination} — "
        f"{alert.label()} (bytes={alert.total_bytes})"
    )


def format_summary(alerts: Iterable[Alert]) -> str:
    lines = [format_alert(a) for a in alerts]
    if not lines:
        return NO_ALERTS_MESSAGE
    return "\n".join(lines)


def alert_row(alert: Alert) -> List[str]:
    return [alert.source, alert.destination, str(alert.total_bytes), alert.label()]


def to_csv(alerts: Iterable[Alert]) -> str:
    """
    Header plus one row per alert. Every field is quoted and embedded
    double quotes are doubled. Rows are separated by a bare newline.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for a in alerts:
        writer.writerow(alert_row(a))
    return buf.getvalue().rstrip("\n")
