"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cardflow.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BoardConfig(BaseModel):
    """[board] section: column naming for newly created boards."""

    model_config = {"frozen": True}

    initial_name: str = "Initial"
    pending_prefix: str = "Pending"
    final_name: str = "Final"
    cancel_name: str = "Cancelled"
    default_pending: int = Field(default=1, ge=0)

    def pending_names(self, count: int) -> list[str]:
        """Default names for *count* pending columns (``Pending 1`` ...)."""
        return [f"{self.pending_prefix} {i}" for i in range(1, count + 1)]
