"""
Pydantic schemas for configuration validation.

Defines the structure and validation rules for run configuration files.
Every field defaults to the embedded sample data, so an empty mapping is a
valid configuration.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from classic_algos.data.samples import (
    SAMPLE_CAPACITY,
    SAMPLE_EDGES,
    SAMPLE_VALUES,
    SAMPLE_VERTICES,
    SAMPLE_WEIGHTS,
)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level for the classic_algos logger"
    )
    log_file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class MSTConfig(BaseModel):
    """Graph used by the MST runner."""

    model_config = ConfigDict(extra="forbid")

    vertices: int = Field(default=SAMPLE_VERTICES, description="Number of vertices", ge=0)
    edges: list[tuple[int, int, int]] = Field(
        default_factory=lambda: list(SAMPLE_EDGES),
        description="Edges as [src, dest, weight] triples",
    )

    @model_validator(mode="after")
    def check_edges(self) -> "MSTConfig":
        """Ensure vertex ids are in range and weights are non-negative."""
        for src, dest, weight in self.edges:
            if not (0 <= src < self.vertices and 0 <= dest < self.vertices):
                raise ValueError(
                    f"Edge ({src}, {dest}, {weight}) has a vertex outside [0, {self.vertices})"
                )
            if weight < 0:
                raise ValueError(f"Edge ({src}, {dest}, {weight}) has a negative weight")
        return self


class KnapsackConfig(BaseModel):
    """Instance used by the knapsack runner."""

    model_config = ConfigDict(extra="forbid")

    values: list[int] = Field(default_factory=lambda: list(SAMPLE_VALUES), description="Item values")
    weights: list[int] = Field(
        default_factory=lambda: list(SAMPLE_WEIGHTS), description="Item weights"
    )
    capacity: int = Field(default=SAMPLE_CAPACITY, description="Knapsack capacity", ge=0)

    @field_validator("weights")
    @classmethod
    def check_non_negative(cls, v: list[int]) -> list[int]:
        """Ensure weights are non-negative."""
        if any(w < 0 for w in v):
            raise ValueError(f"Weights must be non-negative, got {v}")
        return v

    @model_validator(mode="after")
    def check_lengths(self) -> "KnapsackConfig":
        """Ensure one weight per value."""
        if len(self.values) != len(self.weights):
            raise ValueError(
                f"values ({len(self.values)}) and weights ({len(self.weights)}) must have the same length"
            )
        return self


class AppConfig(BaseModel):
    """Complete run configuration."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    mst: MSTConfig = Field(default_factory=MSTConfig, description="MST sample configuration")
    knapsack: KnapsackConfig = Field(
        default_factory=KnapsackConfig, description="Knapsack sample configuration"
    )
