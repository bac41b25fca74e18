"""
Tests for HtmlDocument.
"""

import pytest

from html_exporter.config import InlineErrorPolicy, StyleMapConfig
from html_exporter.css.color import RED, Color
from html_exporter.css.properties import CssStringProperty
from html_exporter.document import HtmlDocument
from html_exporter.exceptions import ParsingError

DARK_GRAY = Color(51, 51, 51)


class TestHtmlDocument:
    """Test cases for HtmlDocument."""

    @pytest.fixture
    def document(self, sample_html):
        return HtmlDocument.from_string(sample_html)

    def test_rules_from_style_elements(self, document):
        assert set(document.rules) == {"body", "td", ".total", "td.total"}

    def test_style_for_cells(self, document):
        plain, total = document.root.findall(".//td")[:2]

        plain_style = document.style_for(plain)
        total_style = document.style_for(total)

        assert plain_style.horizontal_alignment() == "left"
        assert plain_style.color() == DARK_GRAY
        assert plain_style.font_size() == 10
        assert not plain_style.is_bold()

        assert total_style.horizontal_alignment() == "right"
        assert total_style.color() == RED
        assert total_style.font_size() == 10
        assert total_style.is_bold()

    def test_identical_rows_share_styles(self, document):
        cells = document.root.findall(".//td")

        assert document.style_for(cells[1]) is document.style_for(cells[3])

    def test_iter_styles_walks_body(self, document):
        pairs = list(document.iter_styles())
        tags = [element.tag for element, _ in pairs]

        assert tags[0] == "body"
        assert tags[-1] == "p"
        assert tags.count("td") == 4
        assert all(isinstance(tag, str) for tag in tags)
        assert pairs[-1][1].font_size() == 14

    def test_html_rules_inherit_into_body(self):
        document = HtmlDocument.from_string(
            "<html><head><style>html { font-family: Arial }</style></head><body><p>x</p></body></html>"
        )

        styles = dict(document.iter_styles())
        paragraph = document.root.find(".//p")

        assert styles[paragraph].get_property(CssStringProperty.FONT_FAMILY) == "Arial"

    def test_element_path(self, document):
        paragraph = document.root.find(".//p")

        assert document.element_path(paragraph) == "html/body/p"

    def test_documents_have_separate_sessions(self):
        markup = "<html><head><style>p {{ text-align: {0} }}</style></head><body><p>x</p></body></html>"
        left = HtmlDocument.from_string(markup.format("left"))
        right = HtmlDocument.from_string(markup.format("right"))

        assert left.style_map is not right.style_map
        assert left.style_for(left.root.find(".//p")).horizontal_alignment() == "left"
        assert right.style_for(right.root.find(".//p")).horizontal_alignment() == "right"

    def test_from_file(self, tmp_path, sample_html):
        path = tmp_path / "page.html"
        path.write_text(sample_html, encoding="utf-8")

        document = HtmlDocument.from_file(path)

        assert ".total" in document.rules

    def test_element_path_of_repeated_sibling(self):
        document = HtmlDocument.from_string("<html><body><div>a</div><div>b</div></body></html>")
        second = document.root.findall(".//div")[1]

        assert document.element_path(second) == "html/body/div[2]"

    def test_from_file_with_xml_declaration(self, tmp_path):
        path = tmp_path / "declared.html"
        path.write_text(
            '<?xml version="1.0" encoding="utf-8"?>\n'
            "<html><head><style>p { text-align: center }</style></head><body><p>x</p></body></html>",
            encoding="utf-8",
        )

        document = HtmlDocument.from_file(path)

        assert document.style_for(document.root.find(".//p")).horizontal_alignment() == "center"

    def test_from_file_honours_declared_charset(self, tmp_path):
        path = tmp_path / "latin1.html"
        path.write_bytes(
            '<html><head><meta charset="iso-8859-1"></head><body><p>café</p></body></html>'.encode("latin-1")
        )

        document = HtmlDocument.from_file(path)

        assert document.root.find(".//p").text_content() == "café"

    def test_str_with_encoding_declaration_raises_parsing_error(self):
        with pytest.raises(ParsingError) as exc_info:
            HtmlDocument.from_string('<?xml version="1.0" encoding="utf-8"?><html><body/></html>')

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unreadable_path_raises_parsing_error(self, tmp_path):
        with pytest.raises(ParsingError):
            HtmlDocument.from_file(tmp_path)

    def test_empty_document(self):
        with pytest.raises(ParsingError):
            HtmlDocument.from_string("   ")

    def test_empty_bytes_document(self):
        with pytest.raises(ParsingError):
            HtmlDocument.from_string(b"  \n")

    def test_config_reaches_style_map(self):
        config = StyleMapConfig(inline_error_policy=InlineErrorPolicy.SKIP)
        document = HtmlDocument.from_string('<html><body><p style="color red">x</p></body></html>', config=config)

        assert document.style_map.config is config
        assert len(document.style_for(document.root.find(".//p"))) == 0
