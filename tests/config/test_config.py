"""Tests for `fixpath.config`."""

from fixpath.config import SEARCH_CONFIG, SearchConfig


def test_default_config() -> None:
    config = SearchConfig()
    assert config.push_front is True
    assert config.max_yen_paths is None
    assert config.trace is False
    assert SEARCH_CONFIG == config


def test_yen_iteration_limit_counts_seed_path() -> None:
    """N - L iterations past the seed path, plus the seed itself."""
    config = SearchConfig()
    assert config.yen_iteration_limit(10, 4) == 7
    assert config.yen_iteration_limit(5, 5) == 1


def test_yen_iteration_limit_never_negative() -> None:
    assert SearchConfig().yen_iteration_limit(3, 7) == 0


def test_yen_iteration_limit_capped() -> None:
    config = SearchConfig(max_yen_paths=3)
    assert config.yen_iteration_limit(100, 4) == 3
    assert config.yen_iteration_limit(5, 4) == 2
