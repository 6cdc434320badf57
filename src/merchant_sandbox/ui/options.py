"""
Configuration axes for payment buttons.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

__all__ = [
    "ButtonColor",
    "ButtonEdges",
    "ButtonLabel",
    "ButtonSize",
    "EdgeInsets",
    "FundingSource",
    "LabelPosition",
]


class FundingSource(str, Enum):
    PAYPAL = "paypal"
    PAY_LATER = "pay_later"
    CREDIT = "credit"


class ButtonColor(str, Enum):
    GOLD = "gold"
    WHITE = "white"
    BLACK = "black"
    SILVER = "silver"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"

    @property
    def hex(self) -> str:
        return _COLOR_HEX[self]

    @property
    def font_color(self) -> str:
        if self.is_dark:
            return "#FFFFFF"
        return "#000000"

    @property
    def is_dark(self) -> bool:
        return self in (ButtonColor.BLACK, ButtonColor.DARK_BLUE, ButtonColor.BLUE)


_COLOR_HEX = {
    ButtonColor.GOLD: "#FFD140",
    ButtonColor.WHITE: "#FFFFFF",
    ButtonColor.BLACK: "#000000",
    ButtonColor.SILVER: "#EEEEEE",
    ButtonColor.BLUE: "#009CDE",
    ButtonColor.DARK_BLUE: "#003087",
}


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: float, horizontal: float) -> "EdgeInsets":
        return cls(vertical, horizontal, vertical, horizontal)


class ButtonSize(str, Enum):
    MINI = "mini"
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"
    FULL = "full"

    @property
    def font_size(self) -> float:
        return _SIZE_METRICS[self][0]

    @property
    def element_spacing(self) -> float:
        return _SIZE_METRICS[self][1]

    @property
    def element_padding(self) -> EdgeInsets:
        return _SIZE_METRICS[self][2]


# font size, spacing between logo and labels, default content padding
_SIZE_METRICS = {
    ButtonSize.MINI: (12.0, 4.0, EdgeInsets.uniform(6.0)),
    ButtonSize.COLLAPSED: (14.0, 4.0, EdgeInsets.symmetric(9.0, 14.0)),
    ButtonSize.EXPANDED: (14.0, 4.5, EdgeInsets.symmetric(11.0, 18.0)),
    ButtonSize.FULL: (16.0, 4.5, EdgeInsets.symmetric(15.0, 22.0)),
}


class LabelPosition(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


class ButtonLabel(str, Enum):
    """Text shown next to the logo, and on which side of it."""

    CHECKOUT = "checkout"
    BUY_NOW = "buy_now"
    PAY_WITH = "pay_with"
    PAY_LATER = "pay_later"

    @property
    def text(self) -> str:
        return _LABELS[self][0]

    @property
    def position(self) -> LabelPosition:
        return _LABELS[self][1]


_LABELS = {
    ButtonLabel.CHECKOUT: ("Checkout", LabelPosition.SUFFIX),
    ButtonLabel.BUY_NOW: ("Buy Now", LabelPosition.SUFFIX),
    ButtonLabel.PAY_WITH: ("Pay with", LabelPosition.PREFIX),
    ButtonLabel.PAY_LATER: ("Pay Later", LabelPosition.SUFFIX),
}


@dataclass(frozen=True)
class ButtonEdges:
    """
    Corner shape of a button.

    ``rounded`` corners are half the shorter side; ``custom`` radii are
    clamped to the same limit.
    """

    style: str
    radius: Optional[float] = None

    HARD: ClassVar["ButtonEdges"]
    SOFT: ClassVar["ButtonEdges"]
    ROUNDED: ClassVar["ButtonEdges"]

    @classmethod
    def custom(cls, radius: float) -> "ButtonEdges":
        if not math.isfinite(radius):
            raise ValueError(f"Corner radius must be a finite number, got {radius}")
        if radius < 0:
            raise ValueError("Corner radius must not be negative")
        return cls("custom", float(radius))

    @classmethod
    def parse(cls, value: "ButtonEdges | str") -> "ButtonEdges":
        if isinstance(value, ButtonEdges):
            return value
        name = value.strip().lower()
        presets = {"hard": cls.HARD, "soft": cls.SOFT, "rounded": cls.ROUNDED}
        if name in presets:
            return presets[name]
        try:
            radius = float(name)
        except ValueError as exc:
            raise ValueError(
                f"Edges must be hard, soft, rounded or a radius, got '{value}'"
            ) from exc
        return cls.custom(radius)

    def corner_radius(self, width: float, height: float) -> float:
        limit = min(width, height) / 2
        if self.style == "rounded":
            return limit
        return min(self.radius or 0.0, limit)


ButtonEdges.HARD = ButtonEdges("hard", 0.0)
ButtonEdges.SOFT = ButtonEdges("soft", 4.0)
ButtonEdges.ROUNDED = ButtonEdges("rounded")
