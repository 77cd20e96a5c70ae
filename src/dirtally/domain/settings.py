# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_CAPACITY = 70_000_000
DEFAULT_REQUIRED = 30_000_000
DEFAULT_AT_MOST_LIMIT = 100_000


@dataclass(frozen=True)
class DiskSettings:
    """Total disk capacity and the free space an update needs."""

    capacity: int = DEFAULT_CAPACITY
    required: int = DEFAULT_REQUIRED

    def __post_init__(self) -> None:
        if self.capacity <= 0 or self.required <= 0:
            raise ConfigurationError(
                f"capacity and required must be positive (got {self.capacity}, {self.required})"
            )
        if self.required > self.capacity:
            raise ConfigurationError(
                f"required free space {self.required} exceeds capacity {self.capacity}"
            )
