#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to generic syntax tree parser."""

import pytest

from md2adf.exceptions import InvalidOptionsError, ValidationError
from md2adf.options import AdfRendererOptions, MarkdownParserOptions
from md2adf.parsers import MarkdownNode, MarkdownParser


def _parse(markdown: str, **options) -> MarkdownNode:
    return MarkdownParser(MarkdownParserOptions(**options) if options else None).parse(markdown)


@pytest.mark.unit
class TestParserBasics:
    """Test top-level structure of the parsed tree."""

    def test_root_node(self) -> None:
        """Parsing returns a root node."""
        root = _parse("hello")
        assert root.kind == "root"
        assert len(root.children) == 1

    def test_empty_input(self) -> None:
        """Empty input has no top-level children."""
        assert _parse("").children == []

    def test_simple_paragraph(self) -> None:
        """A single line becomes one paragraph with one text child."""
        paragraph = _parse("this is some paragraph").children[0]
        assert paragraph.kind == "paragraph"
        assert paragraph.children == [MarkdownNode(kind="text", value="this is some paragraph")]

    def test_blank_lines_dropped(self) -> None:
        """Blank lines between blocks do not appear in the tree."""
        root = _parse("first\n\n\n\nsecond\n")
        assert [child.kind for child in root.children] == ["paragraph", "paragraph"]

    def test_rejects_non_string(self) -> None:
        """Only str input is accepted."""
        with pytest.raises(ValidationError) as exc_info:
            MarkdownParser().parse(b"bytes")  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "markdown"

    def test_rejects_wrong_options(self) -> None:
        """Renderer options cannot configure the parser."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(AdfRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestInlineNormalization:
    """Test inline token normalization."""

    def test_soft_break_folded_into_text(self) -> None:
        """A paragraph spanning lines is a single text run."""
        paragraph = _parse("line one\nline two").children[0]
        assert len(paragraph.children) == 1
        assert paragraph.children[0].kind == "text"
        assert paragraph.children[0].value == "line one\nline two"

    def test_entities_decoded(self) -> None:
        """HTML character references become literal characters."""
        paragraph = _parse("fish &amp; chips &lt;3").children[0]
        assert paragraph.children[0].value == "fish & chips <3"

    @pytest.mark.parametrize(
        "markdown, expected",
        [
            ("AT&T rocks", "AT&T rocks"),
            ("see ?a=1&copy=2 here", "see ?a=1&copy=2 here"),
            ("x&notit", "x&notit"),
            ("x &notit; y", "x &notit; y"),
            ("&copy; 2025", "\u00a9 2025"),
            ("&#35; and &#x41;", "# and A"),
        ],
    )
    def test_only_complete_references_decoded(self, markdown: str, expected: str) -> None:
        """Ampersands without a complete reference stay literal."""
        paragraph = _parse(markdown).children[0]
        assert paragraph.children == [MarkdownNode(kind="text", value=expected)]

    def test_escaped_ampersand_not_decoded(self) -> None:
        """A backslash-escaped ampersand never starts a reference."""
        paragraph = _parse(r"a \&amp; b").children[0]
        assert paragraph.children == [MarkdownNode(kind="text", value="a &amp; b")]

    def test_backslash_escape(self) -> None:
        """Escaped punctuation is kept as text."""
        paragraph = _parse(r"not \*emphasis\*").children[0]
        assert [child.kind for child in paragraph.children] == ["text"]
        assert paragraph.children[0].value == "not *emphasis*"

    def test_inline_link(self) -> None:
        """Links expose their URL and typed children."""
        paragraph = _parse("[alamakota](http://duckduck.go)").children[0]
        link = paragraph.children[0]
        assert link.kind == "link"
        assert link.url == "http://duckduck.go"
        assert link.children == [MarkdownNode(kind="text", value="alamakota")]

    def test_autolink(self) -> None:
        """Angle-bracket autolinks use the URL as their text child."""
        paragraph = _parse("<http://google.com>").children[0]
        link = paragraph.children[0]
        assert link.kind == "link"
        assert link.url == "http://google.com"
        assert link.first_child == MarkdownNode(kind="text", value="http://google.com")

    def test_link_title_kept_in_attrs(self) -> None:
        """Link titles are available as attributes."""
        link = _parse('[t](http://x "Title")').children[0].children[0]
        assert link.attrs.get("title") == "Title"
        assert "url" not in link.attrs

    def test_link_with_emphasis_child(self) -> None:
        """Formatting inside a link is reported as a typed child."""
        link = _parse("[*em*](http://x)").children[0].children[0]
        assert link.first_child is not None
        assert link.first_child.kind == "emphasis"

    def test_mixed_inline_order(self) -> None:
        """Inline children keep source order."""
        paragraph = _parse("[a](http://a) <http://b> tail").children[0]
        assert [child.kind for child in paragraph.children] == ["link", "text", "link", "text"]
        assert paragraph.children[1].value == " "
        assert paragraph.children[3].value == " tail"

    @pytest.mark.parametrize(
        "markdown, kind",
        [
            ("*hi*", "emphasis"),
            ("**hi**", "strong"),
            ("`code`", "inlineCode"),
            ("![alt](img.png)", "image"),
            ("~~gone~~", "delete"),
            ("a <span>b</span>", "html"),
        ],
    )
    def test_inline_kind_names(self, markdown: str, kind: str) -> None:
        """Inline constructs get stable kind names."""
        paragraph = _parse(markdown).children[0]
        assert kind in [child.kind for child in paragraph.children]

    def test_hard_break(self) -> None:
        """Two trailing spaces produce a break node."""
        paragraph = _parse("one  \ntwo").children[0]
        assert [child.kind for child in paragraph.children] == ["text", "break", "text"]

    def test_hard_wrap_option(self) -> None:
        """With hard_wrap every newline is a break."""
        paragraph = _parse("one\ntwo", hard_wrap=True).children[0]
        assert "break" in [child.kind for child in paragraph.children]

    def test_strikethrough_disabled(self) -> None:
        """Without the extension ~~ stays literal text."""
        paragraph = _parse("~~gone~~", parse_strikethrough=False).children[0]
        assert [child.kind for child in paragraph.children] == ["text"]
        assert paragraph.children[0].value == "~~gone~~"


@pytest.mark.unit
class TestLinkDestinations:
    """Test that link URLs are kept as written in the source."""

    @pytest.mark.parametrize(
        "markdown, url",
        [
            ("[a](http://例え.jp/ü)", "http://例え.jp/ü"),
            ("[a](http://x.com/it's)", "http://x.com/it's"),
            ("[a](http://x.com/a%20b)", "http://x.com/a%20b"),
            ("[a](http://x.com/?a=1&amp;b=2)", "http://x.com/?a=1&b=2"),
            (r"[a](http://x.com/\(x\))", "http://x.com/(x)"),
            ('[a](http://x.com/ü "Title")', "http://x.com/ü"),
        ],
    )
    def test_inline_link_url(self, markdown: str, url: str) -> None:
        """Inline destinations only have escapes and references resolved."""
        link = _parse(markdown).children[0].children[0]
        assert link.kind == "link"
        assert link.url == url

    def test_autolink_url_and_text(self) -> None:
        """Autolinks keep their URL and label exactly as written."""
        link = _parse("<http://x.com/ü?a&amp;b>").children[0].children[0]
        assert link.url == "http://x.com/ü?a&amp;b"
        assert link.first_child == MarkdownNode(kind="text", value="http://x.com/ü?a&amp;b")

    def test_email_autolink(self) -> None:
        """Email autolinks get a mailto: URL."""
        link = _parse("<me@example.com>").children[0].children[0]
        assert link.url == "mailto:me@example.com"

    def test_reference_link_url(self) -> None:
        """Reference definitions keep their destination as written."""
        link = _parse("[a][ref]\n\n[ref]: http://x.com/ü'").children[0].children[0]
        assert link.kind == "link"
        assert link.url == "http://x.com/ü'"

    def test_image_url(self) -> None:
        """Image sources follow the same rule."""
        image = _parse("![alt](pics/ü.png)").children[0].children[0]
        assert image.kind == "image"
        assert image.url == "pics/ü.png"


@pytest.mark.unit
class TestCodeBlocks:
    """Test code block normalization."""

    def test_fenced_code(self) -> None:
        """The final newline of a fenced block is removed."""
        code = _parse("```\na = 42\n```").children[0]
        assert code.kind == "code"
        assert code.value == "a = 42"

    def test_fenced_code_keeps_inner_newlines(self) -> None:
        """Interior lines and indentation are preserved."""
        code = _parse("```python\ndef f():\n    return 1\n\n\nx = f()\n```").children[0]
        assert code.value == "def f():\n    return 1\n\n\nx = f()"
        assert code.attrs.get("info") == "python"

    def test_indented_code(self) -> None:
        """Indented code blocks are code nodes too."""
        code = _parse("    a = 42\n").children[0]
        assert code.kind == "code"
        assert code.value == "a = 42"

    def test_code_text_not_unescaped(self) -> None:
        """Code payloads are kept verbatim."""
        code = _parse("```\nx &amp; y\n```").children[0]
        assert code.value == "x &amp; y"


@pytest.mark.unit
class TestBlockKinds:
    """Test block-level kind names."""

    @pytest.mark.parametrize(
        "markdown, kind",
        [
            ("# Title", "heading"),
            ("- a\n- b", "list"),
            ("1. a\n2. b", "list"),
            ("> quoted", "blockquote"),
            ("---", "thematicBreak"),
            ("<div>\nhtml\n</div>", "html"),
            ("| a | b |\n|---|---|\n| 1 | 2 |", "table"),
        ],
    )
    def test_block_kind_names(self, markdown: str, kind: str) -> None:
        """Block constructs get stable kind names."""
        assert _parse(markdown).children[0].kind == kind

    def test_heading_level(self) -> None:
        """Heading attributes are preserved."""
        heading = _parse("## Sub").children[0]
        assert heading.attrs.get("level") == 2

    def test_tables_disabled(self) -> None:
        """Without the table extension a pipe table is a paragraph."""
        root = _parse("| a | b |\n|---|---|\n| 1 | 2 |", parse_tables=False)
        assert root.children[0].kind == "paragraph"
