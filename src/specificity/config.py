from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True)
class EngineConfig:
    max_depth: int = DEFAULT_MAX_DEPTH  # nested :is/:where/:not/:has levels
    cache_size: int = 1024  # 0 = unbounded

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.cache_size < 0:
            raise ValueError(f"cache_size must be non-negative, got {self.cache_size}")


DEFAULT_CONFIG = EngineConfig()
