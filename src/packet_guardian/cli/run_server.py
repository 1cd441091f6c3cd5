from __future__ import annotations
import logging
from packet_guardian.core.config import DetectionConfig, line_formats_from_env
from packet_guardian.core.server import PacketGuardianMCPServer


def main() -> None:
    """
    Load line formats from PG_LINE_FORMATS and thresholds from PG_* env vars.

    Example:
      export PG_LINE_FORMATS='[
        "packet_guardian.formats.bracketed.format:build_format",
        "packet_guardian.formats.token_scan.format:build_format"
      ]'
      export PG_BYTE_THRESHOLD=500000
      python -m packet_guardian.cli.run_server
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    server = PacketGuardianMCPServer(
        format_imports=line_formats_from_env(),
        config=DetectionConfig.from_env(),
    )
    server.run()


if __name__ == "__main__":
    main()
