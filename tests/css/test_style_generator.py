"""
Tests for StyleGenerator.
"""

import pytest

from html_exporter.css.color import BLACK, BLUE, RED, WHITE
from html_exporter.css.declarations import Declaration
from html_exporter.css.properties import CssColorProperty, CssIntegerProperty, CssStringProperty
from html_exporter.css.style_generator import StyleGenerator


class TestStyleGenerator:
    """Test cases for StyleGenerator."""

    @pytest.fixture
    def generator(self):
        return StyleGenerator()

    @pytest.mark.parametrize("value, expected", [
        ("white", WHITE),
        ("#ff0000", RED),
        ("rgb(0, 0, 255)", BLUE),
    ])
    def test_color(self, generator, value, expected):
        style = generator.create_style(Declaration("color", value))

        assert style == {CssColorProperty.COLOR: expected}

    @pytest.mark.parametrize("value", ["currentColor", "not-a-color"])
    def test_unusable_color_is_skipped(self, generator, value):
        assert len(generator.create_style(Declaration("background-color", value))) == 0

    @pytest.mark.parametrize("value, expected", [
        ("12", 12),
        ("12px", 12),
        ("12.6pt", 13),
        (" 9 ", 9),
    ])
    def test_integer(self, generator, value, expected):
        style = generator.create_style(Declaration("font-size", value))

        assert style.font_size() == expected

    def test_integer_without_number_is_skipped(self, generator):
        assert len(generator.create_style(Declaration("font-size", "large"))) == 0

    def test_keyword_is_normalized(self, generator):
        style = generator.create_style(Declaration("text-decoration", "Underline   Line-Through"))

        assert style.get_property(CssStringProperty.TEXT_DECORATION) == "underline line-through"

    def test_font_family_keeps_case(self, generator):
        style = generator.create_style(Declaration("font-family", "'Times New Roman', serif"))

        assert style.get_property(CssStringProperty.FONT_FAMILY) == "Times New Roman, serif"

    def test_unknown_property_is_ignored(self, generator):
        assert len(generator.create_style(Declaration("margin", "4px"))) == 0

    def test_border_shorthand(self, generator):
        style = generator.create_style(Declaration("border", "1px solid black"))

        assert style == {
            CssStringProperty.BORDER_WIDTH: "1px",
            CssStringProperty.BORDER_STYLE: "solid",
            CssColorProperty.BORDER_COLOR: BLACK,
        }

    def test_border_shorthand_with_function_color(self, generator):
        style = generator.create_style(Declaration("border", "thick rgb(255, 0, 0)"))

        assert style.get_property(CssColorProperty.BORDER_COLOR) == RED
        assert style.get_property(CssStringProperty.BORDER_WIDTH) == "thick"

    def test_background_shorthand(self, generator):
        style = generator.create_style(Declaration("background", "red url(x.png) no-repeat"))

        assert style == {CssColorProperty.BACKGROUND_COLOR: RED}

    def test_width(self, generator):
        style = generator.create_style(Declaration("width", "250px"))

        assert style.get_property(CssIntegerProperty.WIDTH) == 250
