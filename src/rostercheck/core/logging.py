"""Process-wide logging setup."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger at the given level."""
    logging.basicConfig(level=level.upper(), format=_FORMAT)
    logging.getLogger("rostercheck").setLevel(level.upper())
