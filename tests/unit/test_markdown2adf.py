#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the markdown to ADF converter."""

from urllib.parse import unquote

import pytest

from mdadf.adf import (
    Blockquote,
    BulletList,
    CodeBlock,
    HardBreak,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)
from mdadf.converters.markdown2adf import MarkdownToAdfConverter
from mdadf.options import AdfOptions, MarkdownParserOptions


def _mark_types(node):
    return [mark.type for mark in node.marks]


def _texts(nodes):
    return "".join(node.text for node in nodes if isinstance(node, Text))


@pytest.mark.unit
class TestBlocks:
    """Test block-level conversion."""

    def test_simple_paragraph(self, convert):
        """Test a single paragraph with one text run."""
        blocks = convert("This is a paragraph.")

        assert len(blocks) == 1
        assert isinstance(blocks[0], Paragraph)
        assert blocks[0].content == (Text("This is a paragraph."),)

    def test_heading_levels(self, convert):
        """Test that ATX headings keep their level."""
        blocks = convert("# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6")

        assert len(blocks) == 6
        for i, block in enumerate(blocks):
            assert isinstance(block, Heading)
            assert block.level == i + 1
            assert block.content == (Text(f"H{i + 1}"),)

    def test_ordered_list_default_start(self, convert):
        """Test an ordered list starting at one."""
        blocks = convert("1. one\n2. two\n3. three")

        assert len(blocks) == 1
        ordered = blocks[0]
        assert isinstance(ordered, OrderedList)
        assert ordered.order == 1
        assert len(ordered.content) == 3
        assert all(isinstance(item, ListItem) for item in ordered.content)
        assert ordered.content[2].content == (Paragraph(content=[Text("three")]),)

    def test_ordered_list_custom_start(self, convert):
        """Test that the first item number becomes the list order."""
        blocks = convert("5. Item")

        assert isinstance(blocks[0], OrderedList)
        assert blocks[0].order == 5

    def test_bullet_list(self, convert):
        """Test an unordered list."""
        blocks = convert("- apples\n- pears")

        assert isinstance(blocks[0], BulletList)
        assert [item.content[0].content[0].text for item in blocks[0].content] == ["apples", "pears"]

    def test_nested_bullet_list(self, convert):
        """Test a bullet list nested inside a list item."""
        blocks = convert("- outer\n  - inner\n- second")

        outer = blocks[0]
        assert isinstance(outer, BulletList)
        assert len(outer.content) == 2

        first_item = outer.content[0]
        assert isinstance(first_item.content[0], Paragraph)
        assert first_item.content[0].content == (Text("outer"),)
        nested = first_item.content[1]
        assert isinstance(nested, BulletList)
        assert nested.content[0].content == (Paragraph(content=[Text("inner")]),)

    def test_loose_list_items_become_paragraphs(self, convert):
        """Test that loose list items hold paragraphs like tight ones."""
        blocks = convert("- one\n\n- two")

        items = blocks[0].content
        assert [type(child) for item in items for child in item.content] == [Paragraph, Paragraph]

    def test_fenced_code_block(self, convert):
        """Test that fenced code keeps its language and exact text."""
        blocks = convert("```python\ndef f():\n    return 1\n```")

        code = blocks[0]
        assert isinstance(code, CodeBlock)
        assert code.language == "python"
        assert code.content == (Text("def f():\n    return 1"),)

    def test_code_block_language_is_first_word(self, convert):
        """Test that extra words in the info string are ignored."""
        blocks = convert("```js title=app.js\nlet x;\n```")

        assert blocks[0].language == "js"

    def test_code_block_keeps_inner_blank_lines(self, convert):
        """Test that only one trailing newline is removed."""
        blocks = convert("```\n  a\n\n  b\n\n```")

        assert blocks[0].language is None
        assert blocks[0].code == "  a\n\n  b\n"

    def test_indented_code_block(self, convert):
        """Test that indented code has no language."""
        blocks = convert("Intro\n\n    x = 1\n")

        code = blocks[1]
        assert isinstance(code, CodeBlock)
        assert code.language is None
        assert code.code == "x = 1"

    def test_block_quote(self, convert):
        """Test a block quote around a paragraph."""
        blocks = convert("> quoted text")

        assert blocks == [Blockquote(content=[Paragraph(content=[Text("quoted text")])])]

    def test_thematic_break(self, convert):
        """Test that a thematic break becomes a rule."""
        blocks = convert("before\n\n---\n\nafter")

        assert [type(block) for block in blocks] == [Paragraph, Rule, Paragraph]

    def test_html_block_is_dropped(self, convert):
        """Test that block HTML between paragraphs produces no node."""
        blocks = convert("first\n\n<div>raw</div>\n\nsecond")

        assert [block.content[0].text for block in blocks] == ["first", "second"]


@pytest.mark.unit
class TestTables:
    """Test GFM table conversion."""

    def test_simple_table(self, convert):
        """Test a header row followed by one data row."""
        blocks = convert("| A | B |\n|---|---|\n| 1 | 2 |")

        table = blocks[0]
        assert isinstance(table, Table)
        assert table.layout == "default"
        assert len(table.content) == 2

        header_row, data_row = table.content
        assert isinstance(header_row, TableRow)
        assert all(isinstance(cell, TableHeader) for cell in header_row.content)
        assert all(isinstance(cell, TableCell) for cell in data_row.content)

        for row in table.content:
            for cell in row.content:
                assert cell.colspan == 1
                assert cell.rowspan == 1
                assert len(cell.content) == 1
                assert isinstance(cell.content[0], Paragraph)

        assert header_row.content[0].content[0].content == (Text("A"),)
        assert data_row.content[1].content[0].content == (Text("2"),)

    def test_empty_cell_holds_empty_text(self, convert):
        """Test that an empty cell still wraps one paragraph with an empty text node."""
        blocks = convert("| A | B |\n|---|---|\n| 1 |   |")

        empty_cell = blocks[0].content[1].content[1]
        assert empty_cell.content == (Paragraph(content=[Text("")]),)

    def test_cell_formatting(self, convert):
        """Test that inline formatting inside cells is kept."""
        blocks = convert("| Name |\n|---|\n| **bold** |")

        text = blocks[0].content[1].content[0].content[0].content[0]
        assert text.text == "bold"
        assert _mark_types(text) == ["strong"]

    def test_table_layout_option(self, convert):
        """Test that the configured layout is written on the table."""
        blocks = convert("| A |\n|---|\n| 1 |", options=AdfOptions(table_layout="wide"))

        assert blocks[0].layout == "wide"

    def test_tables_disabled(self, convert):
        """Test that pipe tables stay paragraphs when table parsing is off."""
        blocks = convert("| A |\n|---|\n| 1 |", parser_options=MarkdownParserOptions(parse_tables=False))

        assert not any(isinstance(block, Table) for block in blocks)
        assert isinstance(blocks[0], Paragraph)


@pytest.mark.unit
class TestInlineFormatting:
    """Test inline marks."""

    def test_bold(self, convert):
        """Test strong text between plain runs."""
        content = convert("This is **bold** text.")[0].content

        assert [node.text for node in content] == ["This is ", "bold", " text."]
        assert _mark_types(content[1]) == ["strong"]
        assert content[0].marks == ()
        assert content[2].marks == ()

    def test_italic(self, convert):
        """Test emphasis."""
        content = convert("*italic*")[0].content

        assert len(content) == 1
        assert content[0].text == "italic"
        assert _mark_types(content[0]) == ["em"]

    def test_inline_code(self, convert):
        """Test a code span."""
        content = convert("Run `make test` now")[0].content

        assert content[1].text == "make test"
        assert _mark_types(content[1]) == ["code"]

    def test_strikethrough(self, convert):
        """Test strikethrough."""
        content = convert("~~gone~~")[0].content

        assert content[0].text == "gone"
        assert _mark_types(content[0]) == ["strike"]

    def test_strikethrough_disabled(self, convert):
        """Test that tildes stay literal when strikethrough parsing is off."""
        content = convert("~~gone~~", parser_options=MarkdownParserOptions(parse_strikethrough=False))[0].content

        assert _texts(content) == "~~gone~~"
        assert not any(node.has_mark("strike") for node in content)

    def test_bold_and_italic_combined(self, convert):
        """Test that triple emphasis gives one text node carrying both marks."""
        content = convert("***both***")[0].content

        assert len(content) == 1
        assert content[0].text == "both"
        assert sorted(_mark_types(content[0])) == ["em", "strong"]

    def test_nested_marks_in_source_order(self, convert):
        """Test that marks are ordered outermost first."""
        content = convert("**bold `code`**")[0].content

        assert _mark_types(content[0]) == ["strong"]
        assert content[1].text == "code"
        assert _mark_types(content[1]) == ["strong", "code"]

    def test_sibling_independence(self, convert):
        """Test that formatting does not leak between sibling runs."""
        content = convert("**bold** plain *italic*")[0].content

        assert [node.text for node in content] == ["bold", " plain ", "italic"]
        assert _mark_types(content[0]) == ["strong"]
        assert content[1].marks == ()
        assert _mark_types(content[2]) == ["em"]

    def test_link(self, convert):
        """Test a link with text."""
        content = convert("[Atlassian](https://www.atlassian.com)")[0].content

        assert len(content) == 1
        assert content[0].text == "Atlassian"
        link = content[0].marks[0]
        assert link.type == "link"
        assert dict(link.attrs) == {"href": "https://www.atlassian.com"}

    def test_link_title_is_not_written(self, convert):
        """Test that link marks carry only the href, even when the link has a title."""
        content = convert('[docs](https://example.com "Read me")')[0].content

        assert content[0].text == "docs"
        assert dict(content[0].marks[0].attrs) == {"href": "https://example.com"}

    def test_formatted_link_text(self, convert):
        """Test that formatting inside link text stacks after the link mark."""
        content = convert("[**bold link**](https://example.com)")[0].content

        assert _mark_types(content[0]) == ["link", "strong"]

    def test_url_autolink(self, convert):
        """Test that an autolink becomes its URL with a link mark."""
        content = convert("See <https://example.com/page>")[0].content

        link_text = content[-1]
        assert link_text.text == "https://example.com/page"
        assert dict(link_text.marks[0].attrs) == {"href": "https://example.com/page"}

    def test_email_autolink(self, convert):
        """Test that an e-mail autolink uses the mailto URL."""
        content = convert("<user@example.com>")[0].content

        assert content[0].text == "mailto:user@example.com"
        assert content[0].marks[0].attrs["href"] == "mailto:user@example.com"

    def test_non_ascii_autolink(self, convert):
        """Test that an autolink with characters mistune percent-encodes keeps text and href equal."""
        content = convert("<https://example.com/café>")[0].content

        assert len(content) == 1
        text = content[0]
        assert _mark_types(text) == ["link"]
        assert text.text == text.marks[-1].attrs["href"]
        assert unquote(text.text) == "https://example.com/café"

    def test_autolink_with_escaped_characters(self, convert):
        """Test an autolink whose URL contains characters that need quoting."""
        content = convert("<https://example.com/a|b>")[0].content

        assert len(content) == 1
        assert content[0].text == content[0].marks[-1].attrs["href"]

    def test_image_becomes_alt_text(self, convert):
        """Test that images degrade to their alt text."""
        content = convert("![a diagram](diagram.png)")[0].content

        assert content == (Text("a diagram"),)

    def test_image_without_alt_uses_url(self, convert):
        """Test that an image without alt text falls back to its URL."""
        content = convert("![](diagram.png)")[0].content

        assert content == (Text("diagram.png"),)

    def test_hard_break(self, convert):
        """Test that a hard line break sits between the two runs."""
        content = convert("Line one  \nLine two")[0].content

        assert content == (Text("Line one"), HardBreak(), Text("Line two"))

    def test_backslash_hard_break(self, convert):
        """Test the backslash form of a hard line break."""
        content = convert("Line one\\\nLine two")[0].content

        assert content == (Text("Line one"), HardBreak(), Text("Line two"))

    def test_soft_break_becomes_space(self, convert):
        """Test that a soft line break is kept as a space."""
        content = convert("first\nsecond")[0].content

        assert _texts(content) == "first second"
        assert not any(isinstance(node, HardBreak) for node in content)

    def test_hard_wrap_option(self, convert):
        """Test that hard_wrap turns single newlines into hard breaks."""
        content = convert("first\nsecond", parser_options=MarkdownParserOptions(hard_wrap=True))[0].content

        assert content == (Text("first"), HardBreak(), Text("second"))

    def test_inline_html_dropped(self, convert):
        """Test that inline HTML tags are dropped by default."""
        content = convert("a <span>b</span> c")[0].content

        assert _texts(content) == "a b c"

    def test_inline_html_preserved(self, convert):
        """Test that inline HTML can be kept as literal text."""
        content = convert("a <span>b</span> c", options=AdfOptions(preserve_inline_html=True))[0].content

        assert _texts(content) == "a <span>b</span> c"


@pytest.mark.unit
class TestTokenConversion:
    """Test conversion of hand-built token trees."""

    def test_unknown_block_is_dropped(self):
        """Test that block tokens without an ADF form are skipped."""
        converter = MarkdownToAdfConverter()
        tokens = [
            {"type": "footnotes", "children": []},
            {"type": "paragraph", "children": [{"type": "text", "raw": "kept"}]},
        ]

        assert converter.convert_tokens(tokens) == [Paragraph(content=[Text("kept")])]

    def test_unknown_inline_is_unwrapped(self):
        """Test that unknown inline tokens contribute their children with the same marks."""
        converter = MarkdownToAdfConverter()
        token = {"type": "superscript", "children": [{"type": "text", "raw": "2"}]}

        nodes = converter.convert_inline(token, ())

        assert nodes == [Text("2")]

    def test_empty_paragraph_is_dropped(self):
        """Test that a paragraph with no inline output produces no node."""
        converter = MarkdownToAdfConverter()
        token = {"type": "paragraph", "children": [{"type": "inline_html", "raw": "<br>"}]}

        assert converter.convert_block(token) is None

    def test_out_of_range_heading_level(self):
        """Test that an invalid heading level falls back to 1."""
        converter = MarkdownToAdfConverter()
        token = {"type": "heading", "attrs": {"level": 9}, "children": [{"type": "text", "raw": "x"}]}

        assert converter.convert_block(token) == Heading(content=[Text("x")], level=1)

    def test_direct_table_row(self):
        """Test that rows outside table_body are still converted as data rows."""
        converter = MarkdownToAdfConverter()
        token = {
            "type": "table",
            "children": [
                {"type": "table_row", "children": [{"type": "table_cell", "children": [{"type": "text", "raw": "x"}]}]}
            ],
        }

        table = converter.convert_block(token)

        assert isinstance(table.content[0].content[0], TableCell)

    def test_sibling_marks_not_shared(self):
        """Test that nested marks never leak into sibling subtrees."""
        converter = MarkdownToAdfConverter()
        token = {
            "type": "strong",
            "children": [
                {"type": "emphasis", "children": [{"type": "text", "raw": "a"}]},
                {"type": "strikethrough", "children": [{"type": "text", "raw": "b"}]},
            ],
        }

        first, second = converter.convert_inline(token, ())

        assert _mark_types(first) == ["strong", "em"]
        assert _mark_types(second) == ["strong", "strike"]
