"""Pydantic base model."""

from pydantic import BaseModel, ConfigDict


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class BenchResult(FrozenBaseModel):
    """Timing of one sort on one input size."""

    algorithm: str
    size: int
    distribution: str
    best_seconds: float
    mean_seconds: float
