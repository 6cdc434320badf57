"""
Logo assets used by payment buttons.

Only dimensions are tracked here; rendering the artwork is up to the host
toolkit, which looks assets up by ``name``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from .options import ButtonColor, ButtonSize, FundingSource

__all__ = ["LOGO_CATALOGUE", "LogoImage", "logo_for", "resize_to_height"]


@dataclass(frozen=True)
class LogoImage:
    name: str
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Logo '{self.name}' must have a positive size, got {self.width}x{self.height}"
            )


# Intrinsic sizes of the bundled artwork, in points.
LOGO_CATALOGUE: Dict[str, Tuple[float, float]] = {
    "paypal_logo": (94.0, 24.0),
    "paypal_monogram": (20.0, 24.0),
    "credit_logo": (118.0, 24.0),
    "credit_monogram": (24.0, 24.0),
}


def logo_for(
    funding_source: FundingSource,
    size: ButtonSize,
    color: ButtonColor,
) -> LogoImage:
    """Pick the catalogue artwork for a button; dark backgrounds get the white variant."""
    family = "credit" if funding_source is FundingSource.CREDIT else "paypal"
    shape = "monogram" if size is ButtonSize.MINI else "logo"
    base = f"{family}_{shape}"
    width, height = LOGO_CATALOGUE[base]
    variant = "white" if color.is_dark else "color"
    return LogoImage(name=f"{base}_{variant}", width=width, height=height)


def resize_to_height(image: LogoImage, height: float) -> LogoImage:
    """Scale ``image`` to ``height`` keeping its aspect ratio."""
    if height <= 0:
        raise ValueError("Target height must be greater than zero")
    if image.height == height:
        return image
    scale = height / image.height
    return replace(image, width=image.width * scale, height=height)
