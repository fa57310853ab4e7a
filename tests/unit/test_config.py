"""Unit tests for configuration module."""

from __future__ import annotations

import pytest

from docsim.infrastructure.config import (
    BenchmarkConfig,
    Config,
    MemoryModelConfig,
    WorkloadConfig,
    get_config,
)


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self, test_config: Config) -> None:
        """Test default configuration values."""
        assert test_config.benchmark.sizes == [1000, 5000, 10000]
        assert test_config.benchmark.queries == 1000
        assert test_config.benchmark.seed == 42
        assert test_config.benchmark.retract_stale_entries is False
        assert test_config.workload.tag_probability == 0.7
        assert test_config.workload.important_probability == 0.3
        assert test_config.workload.link_probability == 0.4
        assert test_config.memory.document_bytes == 176
        assert test_config.observability.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested fields are read from DOCSIM_<SECTION>__<FIELD>."""
        monkeypatch.setenv("DOCSIM_BENCHMARK__QUERIES", "50")
        monkeypatch.setenv("DOCSIM_OBSERVABILITY__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.benchmark.queries == 50
        assert config.observability.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"queries": 0},
            {"seed": -1},
            {"sizes": []},
            {"sizes": [10, 0]},
        ],
    )
    def test_invalid_benchmark(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            BenchmarkConfig(**kwargs)

    def test_invalid_probability(self) -> None:
        with pytest.raises(ValueError):
            WorkloadConfig(link_probability=1.5)

    def test_score_range_must_be_nonempty(self) -> None:
        with pytest.raises(ValueError):
            WorkloadConfig(score_min=10, score_max=10)

    def test_negative_memory_constant(self) -> None:
        with pytest.raises(ValueError):
            MemoryModelConfig(table_bytes=-5)


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        assert get_config() is get_config()

    def test_cache_clear_rereads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        get_config()
        monkeypatch.setenv("DOCSIM_BENCHMARK__SEED", "7")
        get_config.cache_clear()

        assert get_config().benchmark.seed == 7
