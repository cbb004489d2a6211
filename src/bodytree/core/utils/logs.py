"""Console logging setup for the CLI"""

import logging
from typing import Optional


def configure_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """Configure a simple console logger; verbose forces DEBUG."""
    resolved = logging.DEBUG if verbose else getattr(logging, (level or "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(levelname)s %(message)s",
        force=True,
    )
