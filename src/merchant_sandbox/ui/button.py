"""
Payment button presentation model.

A button is fixed at construction by its :class:`ButtonConfiguration`.
:func:`derive_presentation` maps that configuration to everything a host
toolkit needs to draw it; the corner radius waits for :meth:`PaymentButton.layout`
because it depends on the button's bounds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from functools import cached_property
from typing import Any, Dict, Optional

from .assets import LogoImage, logo_for, resize_to_height
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
    "ButtonConfiguration",
    "ButtonLayout",
    "ButtonPresentation",
    "PaymentButton",
    "derive_presentation",
    "image_height",
    "supports_prefix_label",
    "supports_suffix_label",
]


@dataclass(frozen=True)
class ButtonConfiguration:
    funding_source: FundingSource
    color: ButtonColor
    edges: ButtonEdges
    size: ButtonSize
    insets: Optional[EdgeInsets] = None
    label: Optional[ButtonLabel] = None

    def __post_init__(self) -> None:
        # Accept plain strings for the enum axes.
        object.__setattr__(self, "funding_source", FundingSource(self.funding_source))
        object.__setattr__(self, "color", ButtonColor(self.color))
        object.__setattr__(self, "edges", ButtonEdges.parse(self.edges))
        object.__setattr__(self, "size", ButtonSize(self.size))
        if self.label is not None:
            object.__setattr__(self, "label", ButtonLabel(self.label))


@dataclass(frozen=True)
class ButtonPresentation:
    image_height: float
    logo: LogoImage
    logo_frame: LogoImage
    prefix_visible: bool
    suffix_visible: bool
    prefix_text: Optional[str]
    suffix_text: Optional[str]
    font_size: float
    font_color: str
    background_color: str
    insets: EdgeInsets
    spacing: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ButtonLayout:
    width: float
    height: float
    corner_radius: float


def image_height(configuration: ButtonConfiguration) -> float:
    size = configuration.size
    if size is ButtonSize.MINI:
        if configuration.funding_source in (FundingSource.PAY_LATER, FundingSource.CREDIT):
            return 12.0
        return 24.0
    if size is ButtonSize.COLLAPSED:
        return 15.0
    if size is ButtonSize.EXPANDED:
        return 20.0
    return 26.0


def supports_prefix_label(configuration: ButtonConfiguration) -> bool:
    if configuration.size is not ButtonSize.FULL:
        return False
    label = configuration.label
    return label is not None and label.position is LabelPosition.PREFIX


def supports_suffix_label(configuration: ButtonConfiguration) -> bool:
    if configuration.funding_source is FundingSource.PAY_LATER:
        return True
    if configuration.size not in (ButtonSize.EXPANDED, ButtonSize.FULL):
        return False
    label = configuration.label
    return label is not None and label.position is LabelPosition.SUFFIX


def _label_text(configuration: ButtonConfiguration, position: LabelPosition) -> Optional[str]:
    label = configuration.label
    if label is not None and label.position is position:
        return label.text
    return None


def _logo_frame(logo: LogoImage, size: ButtonSize) -> LogoImage:
    if size is ButtonSize.MINI:
        side = max(logo.width, logo.height)
        return LogoImage(name=logo.name, width=side, height=side)
    return logo


def derive_presentation(
    configuration: ButtonConfiguration,
    logo: Optional[LogoImage] = None,
) -> ButtonPresentation:
    """Compute the presentation of a button; ``logo`` overrides the catalogue artwork."""
    if logo is None:
        logo = logo_for(configuration.funding_source, configuration.size, configuration.color)
    height = image_height(configuration)
    resized = resize_to_height(logo, height)
    size = configuration.size

    return ButtonPresentation(
        image_height=height,
        logo=resized,
        logo_frame=_logo_frame(resized, size),
        prefix_visible=supports_prefix_label(configuration),
        suffix_visible=supports_suffix_label(configuration),
        prefix_text=_label_text(configuration, LabelPosition.PREFIX),
        suffix_text=_label_text(configuration, LabelPosition.SUFFIX),
        font_size=size.font_size,
        font_color=configuration.color.font_color,
        background_color=configuration.color.hex,
        insets=configuration.insets or size.element_padding,
        spacing=size.element_spacing,
    )


class PaymentButton:
    """
    A payment button with write-once configuration.

    Use :meth:`paypal`, :meth:`pay_later` or :meth:`credit` for the common
    funding sources.
    """

    def __init__(
        self,
        funding_source: FundingSource | str,
        color: ButtonColor | str,
        edges: ButtonEdges | str,
        size: ButtonSize | str,
        insets: Optional[EdgeInsets] = None,
        label: Optional[ButtonLabel | str] = None,
        *,
        logo: Optional[LogoImage] = None,
    ) -> None:
        self._configuration = ButtonConfiguration(
            funding_source=funding_source,
            color=color,
            edges=edges,
            size=size,
            insets=insets,
            label=label,
        )
        self._logo = logo

    @classmethod
    def paypal(
        cls,
        color: ButtonColor | str = ButtonColor.GOLD,
        edges: ButtonEdges | str = ButtonEdges.SOFT,
        size: ButtonSize | str = ButtonSize.COLLAPSED,
        insets: Optional[EdgeInsets] = None,
        label: Optional[ButtonLabel | str] = None,
    ) -> "PaymentButton":
        return cls(FundingSource.PAYPAL, color, edges, size, insets, label)

    @classmethod
    def pay_later(
        cls,
        color: ButtonColor | str = ButtonColor.GOLD,
        edges: ButtonEdges | str = ButtonEdges.SOFT,
        size: ButtonSize | str = ButtonSize.COLLAPSED,
        insets: Optional[EdgeInsets] = None,
        label: Optional[ButtonLabel | str] = ButtonLabel.PAY_LATER,
    ) -> "PaymentButton":
        return cls(FundingSource.PAY_LATER, color, edges, size, insets, label)

    @classmethod
    def credit(
        cls,
        color: ButtonColor | str = ButtonColor.DARK_BLUE,
        edges: ButtonEdges | str = ButtonEdges.SOFT,
        size: ButtonSize | str = ButtonSize.COLLAPSED,
        insets: Optional[EdgeInsets] = None,
        label: Optional[ButtonLabel | str] = None,
    ) -> "PaymentButton":
        return cls(FundingSource.CREDIT, color, edges, size, insets, label)

    @property
    def configuration(self) -> ButtonConfiguration:
        return self._configuration

    @property
    def funding_source(self) -> FundingSource:
        return self._configuration.funding_source

    @property
    def color(self) -> ButtonColor:
        return self._configuration.color

    @property
    def edges(self) -> ButtonEdges:
        return self._configuration.edges

    @property
    def size(self) -> ButtonSize:
        return self._configuration.size

    @property
    def insets(self) -> Optional[EdgeInsets]:
        return self._configuration.insets

    @property
    def label(self) -> Optional[ButtonLabel]:
        return self._configuration.label

    @cached_property
    def presentation(self) -> ButtonPresentation:
        return derive_presentation(self._configuration, self._logo)

    def layout(self, width: float, height: float) -> ButtonLayout:
        """Resolve bounds-dependent styling for a button of ``width`` x ``height``."""
        if width < 0 or height < 0:
            raise ValueError("Button bounds must not be negative")
        if self.size is ButtonSize.MINI:
            radius = min(width, height) / 2
        else:
            radius = self.edges.corner_radius(width, height)
        return ButtonLayout(width=width, height=height, corner_radius=radius)

    def __repr__(self) -> str:
        config = self._configuration
        return (
            f"PaymentButton(funding_source={config.funding_source.value!r}, "
            f"color={config.color.value!r}, size={config.size.value!r}, "
            f"label={config.label.value if config.label else None!r})"
        )
