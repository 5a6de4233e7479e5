"""Key option models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class KeyOptions(BaseModel):
    """Resolved configuration for key generation and projection.

    When ``symbol`` is enabled keys are opaque ``Symbol`` tokens compared by
    identity; otherwise keys are plain strings prefixed with an underscore.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    symbol: bool = True
