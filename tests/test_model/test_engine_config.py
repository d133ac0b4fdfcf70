"""Tests for EngineConfig."""

import pytest

from specificity.config import DEFAULT_CONFIG, DEFAULT_MAX_DEPTH, EngineConfig


class TestEngineConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_MAX_DEPTH == 32
        assert DEFAULT_CONFIG.max_depth == 32
        assert DEFAULT_CONFIG.cache_size == 1024

    def test_custom(self) -> None:
        config = EngineConfig(max_depth=8, cache_size=0)
        assert config.max_depth == 8
        assert config.cache_size == 0

    @pytest.mark.parametrize("depth", [0, -3])
    def test_rejects_non_positive_depth(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            EngineConfig(max_depth=depth)

    def test_rejects_negative_cache_size(self) -> None:
        with pytest.raises(ValueError, match="cache_size"):
            EngineConfig(cache_size=-1)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_depth = 1  # type: ignore[misc]
