"""
Payment button presentation model.
"""

from .assets import LOGO_CATALOGUE, LogoImage, logo_for, resize_to_height
from .button import (
    ButtonConfiguration,
    ButtonLayout,
    ButtonPresentation,
    PaymentButton,
    derive_presentation,
)
from .options import (
    ButtonColor,
    ButtonEdges,
    ButtonLabel,
    ButtonSize,
    EdgeInsets,
    FundingSource,
    LabelPosition,
)

__all__ = [
    "LOGO_CATALOGUE",
    "ButtonColor",
    "ButtonConfiguration",
    "ButtonEdges",
    "ButtonLabel",
    "ButtonLayout",
    "ButtonPresentation",
    "ButtonSize",
    "EdgeInsets",
    "FundingSource",
    "LabelPosition",
    "LogoImage",
    "PaymentButton",
    "derive_presentation",
    "logo_for",
    "resize_to_height",
]
