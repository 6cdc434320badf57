"""Tests for payment button presentation and layout rules."""

import pytest

from merchant_sandbox.ui import (
    ButtonColor,
    ButtonConfiguration,
    ButtonEdges,
    ButtonLabel,
    ButtonSize,
    EdgeInsets,
    FundingSource,
    LogoImage,
    PaymentButton,
    derive_presentation,
    logo_for,
    resize_to_height,
)


def _button(funding_source=FundingSource.PAYPAL, size=ButtonSize.FULL, label=None, **kwargs):
    return PaymentButton(
        funding_source=funding_source,
        color=kwargs.pop("color", ButtonColor.GOLD),
        edges=kwargs.pop("edges", ButtonEdges.SOFT),
        size=size,
        label=label,
        **kwargs,
    )


@pytest.mark.parametrize(
    "funding_source, size, height",
    [
        (FundingSource.PAYPAL, ButtonSize.MINI, 24),
        (FundingSource.PAY_LATER, ButtonSize.MINI, 12),
        (FundingSource.CREDIT, ButtonSize.MINI, 12),
        (FundingSource.PAY_LATER, ButtonSize.COLLAPSED, 15),
        (FundingSource.CREDIT, ButtonSize.EXPANDED, 20),
        (FundingSource.PAYPAL, ButtonSize.FULL, 26),
    ],
)
def test_image_height(funding_source, size, height):
    assert _button(funding_source, size).presentation.image_height == height


@pytest.mark.parametrize("label", [None, ButtonLabel.CHECKOUT, ButtonLabel.PAY_WITH])
def test_mini_pay_later_always_shows_suffix(label):
    presentation = _button(FundingSource.PAY_LATER, ButtonSize.MINI, label).presentation

    assert presentation.image_height == 12
    assert presentation.suffix_visible is True
    assert presentation.prefix_visible is False


def test_full_prefix_label_is_visible():
    presentation = _button(FundingSource.PAYPAL, ButtonSize.FULL, ButtonLabel.PAY_WITH).presentation

    assert presentation.prefix_visible is True
    assert presentation.prefix_text == "Pay with"
    assert presentation.suffix_visible is False
    assert presentation.suffix_text is None


def test_full_prefix_label_with_pay_later_shows_both():
    presentation = _button(FundingSource.PAY_LATER, ButtonSize.FULL, ButtonLabel.PAY_WITH).presentation

    assert presentation.prefix_visible is True
    assert presentation.suffix_visible is True


@pytest.mark.parametrize("size", [ButtonSize.MINI, ButtonSize.COLLAPSED, ButtonSize.EXPANDED])
def test_prefix_hidden_below_full(size):
    assert _button(size=size, label=ButtonLabel.PAY_WITH).presentation.prefix_visible is False


@pytest.mark.parametrize(
    "size, visible",
    [
        (ButtonSize.MINI, False),
        (ButtonSize.COLLAPSED, False),
        (ButtonSize.EXPANDED, True),
        (ButtonSize.FULL, True),
    ],
)
def test_suffix_visibility_by_size(size, visible):
    presentation = _button(FundingSource.CREDIT, size, ButtonLabel.CHECKOUT).presentation

    assert presentation.suffix_visible is visible
    assert presentation.suffix_text == "Checkout"


def test_suffix_hidden_without_label():
    assert _button(size=ButtonSize.EXPANDED).presentation.suffix_visible is False


def test_logo_is_resized_to_image_height():
    presentation = _button(size=ButtonSize.FULL).presentation

    assert presentation.logo.name == "paypal_logo_color"
    assert presentation.logo.height == 26
    assert presentation.logo.width == pytest.approx(94 * 26 / 24)
    assert presentation.logo_frame == presentation.logo


def test_logo_at_target_height_is_unchanged():
    logo = logo_for(FundingSource.PAYPAL, ButtonSize.MINI, ButtonColor.BLACK)

    assert logo.name == "paypal_monogram_white"
    assert resize_to_height(logo, 24) is logo


def test_mini_logo_frame_is_square():
    presentation = _button(size=ButtonSize.MINI).presentation

    assert presentation.logo.width == 20
    assert (presentation.logo_frame.width, presentation.logo_frame.height) == (24, 24)


def test_custom_logo_overrides_catalogue():
    custom = LogoImage(name="brand", width=50, height=10)
    button = _button(size=ButtonSize.EXPANDED, logo=custom)

    assert button.presentation.logo == LogoImage(name="brand", width=100, height=20)


def test_resize_rejects_non_positive_height():
    with pytest.raises(ValueError):
        resize_to_height(LogoImage("x", 10, 10), 0)


@pytest.mark.parametrize("width, height", [(10, 0), (0, 10), (-4, 8)])
def test_logo_requires_positive_size(width, height):
    with pytest.raises(ValueError):
        LogoImage("x", width, height)


def test_insets_default_to_size_padding():
    assert _button(size=ButtonSize.FULL).presentation.insets == ButtonSize.FULL.element_padding

    custom = EdgeInsets(1, 2, 3, 4)
    assert _button(insets=custom).presentation.insets == custom


def test_colors_drive_background_and_font():
    presentation = _button(color=ButtonColor.DARK_BLUE).presentation

    assert presentation.background_color == "#003087"
    assert presentation.font_color == "#FFFFFF"
    assert presentation.logo.name.endswith("_white")
    assert _button(color=ButtonColor.SILVER).presentation.font_color == "#000000"


def test_presentation_is_computed_once():
    button = _button()

    assert button.presentation is button.presentation


def test_configuration_accepts_strings():
    button = PaymentButton("pay_later", "white", "rounded", "expanded", label="buy_now")

    assert button.funding_source is FundingSource.PAY_LATER
    assert button.color is ButtonColor.WHITE
    assert button.edges == ButtonEdges.ROUNDED
    assert button.size is ButtonSize.EXPANDED
    assert button.label is ButtonLabel.BUY_NOW


@pytest.mark.parametrize(
    "kwargs",
    [
        {"funding_source": "venmo"},
        {"color": "purple"},
        {"size": "huge"},
        {"edges": "wavy"},
        {"edges": "-3"},
        {"label": "donate"},
    ],
)
def test_invalid_configuration_raises(kwargs):
    values = {
        "funding_source": "paypal",
        "color": "gold",
        "edges": "soft",
        "size": "full",
    }
    values.update(kwargs)
    with pytest.raises(ValueError):
        ButtonConfiguration(**values)


def test_mini_layout_is_circular():
    layout = _button(size=ButtonSize.MINI, edges=ButtonEdges.HARD).layout(40, 36)

    assert layout.corner_radius == 18


@pytest.mark.parametrize(
    "edges, radius",
    [
        (ButtonEdges.HARD, 0),
        (ButtonEdges.SOFT, 4),
        (ButtonEdges.ROUNDED, 22),
        (ButtonEdges.custom(10), 10),
        (ButtonEdges.custom(100), 22),
        ("7.5", 7.5),
    ],
)
def test_layout_radius_follows_edges(edges, radius):
    layout = _button(size=ButtonSize.FULL, edges=edges).layout(300, 44)

    assert layout.corner_radius == radius
    assert (layout.width, layout.height) == (300, 44)


def test_layout_rejects_negative_bounds():
    with pytest.raises(ValueError):
        _button().layout(-1, 10)


def test_convenience_constructors():
    assert PaymentButton.paypal().funding_source is FundingSource.PAYPAL
    pay_later = PaymentButton.pay_later()
    assert pay_later.label is ButtonLabel.PAY_LATER
    assert pay_later.presentation.suffix_text == "Pay Later"
    credit = PaymentButton.credit(size="mini")
    assert credit.color is ButtonColor.DARK_BLUE
    assert credit.presentation.logo.name == "credit_monogram_white"


def test_derive_presentation_is_pure():
    configuration = ButtonConfiguration(
        funding_source=FundingSource.PAYPAL,
        color=ButtonColor.GOLD,
        edges=ButtonEdges.SOFT,
        size=ButtonSize.EXPANDED,
        label=ButtonLabel.CHECKOUT,
    )

    assert derive_presentation(configuration) == derive_presentation(configuration)
    as_dict = derive_presentation(configuration).as_dict()
    assert as_dict["logo"]["height"] == 20
    assert as_dict["insets"] == {"top": 11.0, "leading": 18.0, "bottom": 11.0, "trailing": 18.0}


def test_negative_radius_keeps_specific_message():
    with pytest.raises(ValueError, match="must not be negative"):
        ButtonEdges.parse("-3")


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_non_finite_radius_is_rejected(value):
    with pytest.raises(ValueError, match="finite"):
        ButtonEdges.parse(value)


@pytest.mark.parametrize("color", list(ButtonColor))
def test_font_color_matches_logo_variant(color):
    presentation = _button(color=color).presentation

    if presentation.logo.name.endswith("_white"):
        assert presentation.font_color == "#FFFFFF"
    else:
        assert presentation.font_color == "#000000"
