from __future__ import annotations
import json
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_LINE_FORMATS = [
    "packet_guardian.formats.bracketed.format:build_format",
    "packet_guardian.formats.csv_line.format:build_format",
    "packet_guardian.formats.token_scan.format:build_format",
]

ENV_TIME_WINDOW = "PG_TIME_WINDOW_SECONDS"
ENV_BYTE_THRESHOLD = "PG_BYTE_THRESHOLD"
ENV_RUN_LENGTH = "PG_INCREASING_RUN_LENGTH"
ENV_LINE_FORMATS = "PG_LINE_FORMATS"


class ConfigurationError(ValueError):
    """
    Raised when detection parameters are out of range.

    Invalid values are never clamped. A run length of 0 or 1 would match
    every flow, so the caller has to fix the input.
    """


@dataclass(frozen=True)
class DetectionConfig:
    """
    Parameters for one detection run.

      time_window_seconds
        Reserved. Byte totals are computed over the whole flow, this value
        does not take part in detection yet.

      byte_threshold
        Flow total at or above this many bytes raises an alert.

      increasing_run_length
        Number of consecutive strictly increasing sizes that raises an alert.
    """

    time_window_seconds: int = 60
    byte_threshold: int = 1_000_000
    increasing_run_length: int = 3

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for name in ("time_window_seconds", "byte_threshold", "increasing_run_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")

        if self.time_window_seconds <= 0:
            raise ConfigurationError(
                f"time_window_seconds must be positive, got {self.time_window_seconds}"
            )
        if self.byte_threshold <= 0:
            raise ConfigurationError(
                f"byte_threshold must be positive, got {self.byte_threshold}"
            )
        if self.increasing_run_length < 2:
            raise ConfigurationError(
                f"increasing_run_length must be at least 2, got {self.increasing_run_length}"
            )

    def updated(
        self,
        time_window_seconds: Optional[int] = None,
        byte_threshold: Optional[int] = None,
        increasing_run_length: Optional[int] = None,
    ) -> "DetectionConfig":
        """
        Return a new config. None leaves the current value in place.
        """
        changes: Dict[str, int] = {}
        if time_window_seconds is not None:
            changes["time_window_seconds"] = time_window_seconds
        if byte_threshold is not None:
            changes["byte_threshold"] = byte_threshold
        if increasing_run_length is not None:
            changes["increasing_run_length"] = increasing_run_length
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DetectionConfig":
        """
        Build a config from PG_* environment variables.

        Example:
          export PG_BYTE_THRESHOLD=500000
          export PG_INCREASING_RUN_LENGTH=4
        """
        env = os.environ if environ is None else environ
        return cls().updated(
            time_window_seconds=_env_int(env, ENV_TIME_WINDOW),
            byte_threshold=_env_int(env, ENV_BYTE_THRESHOLD),
            increasing_run_length=_env_int(env, ENV_RUN_LENGTH),
        )


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def line_formats_from_env(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Load line format import paths from PG_LINE_FORMATS.

    Example:
      export PG_LINE_FORMATS='[
        "packet_guardian.formats.bracketed.format:build_format",
        "packet_guardian.formats.csv_line.format:build_format"
      ]'
    """
    env = os.environ if environ is None else environ
    raw = env.get(ENV_LINE_FORMATS)
    if not raw:
        return list(DEFAULT_LINE_FORMATS)

    try:
        paths = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{ENV_LINE_FORMATS} is not valid JSON: {exc}") from None

    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigurationError(f"{ENV_LINE_FORMATS} must be a JSON list of strings")
    return paths
