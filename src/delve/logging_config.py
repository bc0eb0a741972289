import logging
import os
import sys


def configure_logging(default_level: int = logging.INFO) -> None:
    """Configure the root logger with a single stderr handler.

    Respects DELVE_LOG_LEVEL env var if present.
    """
    level_name = os.getenv("DELVE_LOG_LEVEL")
    level = default_level
    if level_name:
        resolved = logging.getLevelName(level_name.upper())
        # unknown names come back as "Level <name>" strings
        level = resolved if isinstance(resolved, int) else default_level

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
