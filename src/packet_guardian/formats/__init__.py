"""
Line formats are pluggable parsing strategies loaded at runtime.

Each format must expose a build_format factory in its format module.
Registry order is match priority.
"""

__all__ = [
    "bracketed",
    "csv_line",
    "token_scan",
]
