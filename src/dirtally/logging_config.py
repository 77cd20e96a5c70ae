# Licensed under the Apache License, Version 2.0
import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "DIRTALLY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(name: Optional[str]) -> int:
    """Level for a name like "debug"; anything unrecognised means INFO."""
    value = getattr(logging, (name or "INFO").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging() -> None:
    logging.basicConfig(level=resolve_level(os.getenv(LOG_LEVEL_ENV)), format=LOG_FORMAT)


def enable_verbose() -> None:
    logging.getLogger().setLevel(logging.DEBUG)
