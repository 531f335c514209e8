"""Primary chat model configuration model."""

from pydantic import BaseModel, Field


class ModelConfig(BaseModel, frozen=True):
    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int | None = Field(default=None, ge=1)
