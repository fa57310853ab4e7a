"""Configuration management for the storage simulation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BenchmarkConfig(BaseModel):
    """Benchmark run configuration."""

    sizes: list[int] = Field(
        default_factory=lambda: [1000, 5000, 10000],
        min_length=1,
        description="Dataset scales (number of records) to compare",
    )
    queries: int = Field(default=1000, ge=1, description="Queries issued per run")
    seed: int = Field(default=42, ge=0, description="Generator seed shared by both engines")
    retract_stale_entries: bool = Field(
        default=False,
        description="Remove stale document index entries when a document id is re-stored",
    )

    @field_validator("sizes")
    @classmethod
    def check_sizes(cls, v: list[int]) -> list[int]:
        """Every scale must hold at least one record."""
        if any(size < 1 for size in v):
            raise ValueError(f"dataset sizes must be positive, got {v}")
        return v


class WorkloadConfig(BaseModel):
    """Synthetic workload shape."""

    tag_probability: float = Field(default=0.7, ge=0.0, le=1.0, description="Chance of a bucket tag")
    important_probability: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Chance of the 'important' tag"
    )
    link_probability: float = Field(
        default=0.4, ge=0.0, le=1.0, description="Chance of a 'references' link"
    )
    score_min: int = Field(default=1, description="Inclusive lower bound of the score draw")
    score_max: int = Field(default=100, description="Exclusive upper bound of the score draw")
    category_buckets: int = Field(
        default=10, ge=2, description="Categories are drawn from [1, category_buckets)"
    )
    tag_buckets: int = Field(default=20, ge=2, description="Tags are drawn from [1, tag_buckets)")

    @field_validator("score_max")
    @classmethod
    def check_score_range(cls, v: int, info) -> int:
        """score_max must exceed score_min."""
        score_min = info.data.get("score_min", 1)
        if v <= score_min:
            raise ValueError(f"score_max ({v}) must be greater than score_min ({score_min})")
        return v


class MemoryModelConfig(BaseModel):
    """Constants of the fixed memory estimation formula."""

    document_store_base_bytes: int = Field(default=144, ge=0, description="Empty document store")
    document_bytes: int = Field(default=176, ge=0, description="Per stored document")
    index_entry_bytes: int = Field(default=64, ge=0, description="Per distinct index key")
    relational_base_bytes: int = Field(default=48, ge=0, description="Empty relational database")
    table_bytes: int = Field(default=1000, ge=0, description="Per table")
    row_bytes: int = Field(default=200, ge=0, description="Per logical record")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    trace_console_export: bool = Field(
        default=False, description="Export spans to the console"
    )
    otel_service_name: str = Field(default="docsim", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the storage simulation."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSIM_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    workload: WorkloadConfig = Field(default_factory=WorkloadConfig)
    memory: MemoryModelConfig = Field(default_factory=MemoryModelConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
