"""Root logger setup for the CLI entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("crm").setLevel(resolved)
    # urllib3 is noisy at DEBUG and would echo request headers.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
