"""Configuration models for Blot.

SequenceMode decides how ambiguous sequences are typed during conversion.
HashConfig is the explicit configuration threaded through every hash request.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from blot.engine.digest import DEFAULT_ALGORITHM, get_algorithm
from blot.protocols import DigestPrimitive


class SequenceMode(str, enum.Enum):
    """How a bare sequence (JSON array, Python list) is typed."""

    LIST = "list"
    SET = "set"


class HashConfig(BaseModel):
    """Per-request hashing configuration.

    The defaults are the documented baseline: sha2-256, sequences as lists,
    sets deduplicated, duplicate dict keys rejected.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: str = DEFAULT_ALGORITHM
    sequence_mode: SequenceMode = SequenceMode.LIST
    common_json: bool = False  # hash every Integer as a Float
    deduplicate_sets: bool = True
    reject_duplicate_keys: bool = True
    max_depth: Optional[int] = Field(default=None, ge=0)  # None = unlimited

    def digest_algorithm(self) -> DigestPrimitive:
        """Resolve ``algorithm`` against the registry.

        Raises:
            UnsupportedAlgorithmError: If the name is not registered.
        """
        return get_algorithm(self.algorithm)


def resolve_config(config: HashConfig | None = None, **overrides) -> HashConfig:
    """Return ``config`` (or the baseline) with keyword overrides applied.

    Overrides set to None are ignored, so callers can forward optional
    arguments unchanged.
    """
    base = config if config is not None else HashConfig()
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return base
    # model_copy skips validation; re-validate so enum strings are coerced
    return HashConfig.model_validate({**base.model_dump(), **update})
