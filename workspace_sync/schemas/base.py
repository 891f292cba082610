"""
Shared Pydantic base model for operation schemas.

Re-exports BaseStrictModel as StrictModel for the operations/ package.
"""

from __future__ import annotations

from workspace_sync.schemas.types import BaseStrictModel


class StrictModel(BaseStrictModel):
    """Operations-layer strict model.

    Inherits from BaseStrictModel (extra='forbid', strict=True, frozen=True).
    Used by workspace_sync/schemas/operations/ package.
    """

    pass
