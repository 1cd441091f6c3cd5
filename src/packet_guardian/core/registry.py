from __future__ import annotations
import importlib
from dataclasses import dataclass
from typing import Dict, List
from .format_base import LineFormat


@dataclass
class LoadedFormat:
    """
    Wrapper for a loaded line format instance.
    """
    name: str
    priority: int
    instance: LineFormat


class LineFormatRegistry:
    """
    Holds loaded line format instances in match priority order.

    Important:
      The parser never imports format modules directly.
      This registry loads modules based on import strings.
      The first registered format that matches a line wins.

    Import string format:
      "some.module.path:factory_function"

    Example:
      "packet_guardian.formats.bracketed.format:build_format"
    """

    def __init__(self):
        self._formats: Dict[str, LoadedFormat] = {}

    def register(self, fmt: LineFormat) -> None:
        if fmt.name in self._formats:
            raise ValueError(f"duplicate line format name {fmt.name}")
        self._formats[fmt.name] = LoadedFormat(
            name=fmt.name, priority=len(self._formats), instance=fmt
        )

    def get(self, name: str) -> LineFormat:
        if name not in self._formats:
            raise KeyError(f"line format not loaded {name}")
        return self._formats[name].instance

    def list(self) -> List[str]:
        return [f.name for f in sorted(self._formats.values(), key=lambda f: f.priority)]

    def ordered(self) -> List[LineFormat]:
        return [self._formats[name].instance for name in self.list()]

    def load_from_import_paths(self, import_paths: List[str]) -> None:
        for path in import_paths:
            module_path, factory_name = path.split(":")
            module = importlib.import_module(module_path)
            factory = getattr(module, factory_name)
            fmt = factory()
            self.register(fmt)

    def __len__(self) -> int:
        return len(self._formats)
