import re
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_mcp_pinned_below_2():
    # core imports mcp.server.fastmcp eagerly, which mcp 2.x no longer ships.
    deps = re.findall(r'"(mcp[^"]*)"', PYPROJECT.read_text())
    assert deps == ["mcp>=1.2,<2"]
