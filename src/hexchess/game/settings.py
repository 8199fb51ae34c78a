"""Rule settings shared by the reducer and the session."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from hexchess.core.enums import PieceType


@dataclass(frozen=True)
class RuleSettings:
    """All configurable rule switches."""

    # Drop moves that leave the mover's own king attacked.
    enforce_king_safety: bool = False

    # Used when a promotion asks for a pawn or a king.
    default_promotion: PieceType = PieceType.QUEEN

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> RuleSettings:
        """Build settings from plain values; unknown keys are ignored.

        ``default_promotion`` accepts a :class:`PieceType`, its name
        (``"rook"``) or its integer value.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {k: v for k, v in values.items() if k in known}

        if "enforce_king_safety" in kwargs:
            kwargs["enforce_king_safety"] = bool(kwargs["enforce_king_safety"])

        promo = kwargs.get("default_promotion")
        if isinstance(promo, str):
            try:
                kwargs["default_promotion"] = PieceType[promo.upper()]
            except KeyError:
                raise ValueError(f"Unknown piece type: {promo!r}") from None
        elif promo is not None:
            kwargs["default_promotion"] = PieceType(promo)

        return cls(**kwargs)
