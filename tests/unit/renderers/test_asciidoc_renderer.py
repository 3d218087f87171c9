#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_asciidoc_renderer.py
"""Unit tests for AsciiDocRenderer.

Tests cover:
- Block structure (headers, paragraphs, quotes, lists, code, tables)
- Inline markup, links, images and reference resolution
- Abbreviation annotation
- Blank-line collapsing and error handling
"""

import io
from typing import Any

import pytest

from md2adoc.ast import (
    AbbreviationDefinition,
    AnchorLink,
    BlockQuote,
    BulletList,
    Definition,
    DefinitionList,
    DefinitionTerm,
    Header,
    HtmlBlock,
    Image,
    InlineCode,
    InlineHtml,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Quoted,
    ReferenceDefinition,
    Root,
    Simple,
    SpecialText,
    Strikethrough,
    StrongEmphasis,
    SuperNode,
    Table,
    TableBody,
    TableCaption,
    TableCell,
    TableColumn,
    TableHeader,
    TableRow,
    Text,
    Verbatim,
)
from md2adoc.exceptions import InvalidOptionsError, UnsupportedNodeError
from md2adoc.options import AsciiDocRendererOptions, MarkdownParserOptions
from md2adoc.renderers.asciidoc import AsciiDocRenderer, collapse_blank_lines


def render(root: Root, **options: Any) -> str:
    return AsciiDocRenderer(AsciiDocRendererOptions(**options)).render_to_string(root)


def para(*inlines: Node) -> Paragraph:
    return Paragraph(children=list(inlines))


def cell(text: str, col_span: int = 1) -> TableCell:
    return TableCell(children=[Text(text=text)], col_span=col_span)


@pytest.mark.unit
class TestBlocks:
    """Tests for headers, paragraphs and thematic breaks."""

    def test_title_and_paragraph(self):
        doc = Root(
            children=[
                Header(level=1, children=[Text(text="Title")]),
                para(Text(text="Hello "), StrongEmphasis(is_strong=True, children=[Text(text="world")])),
            ]
        )
        assert render(doc) == "= Title\n\nHello *world*"

    @pytest.mark.parametrize("level,prefix", [(2, "=="), (3, "==="), (6, "======")])
    def test_header_levels(self, level, prefix):
        doc = Root(children=[Header(level=level, children=[Text(text="Sec")])])
        assert render(doc) == f"{prefix} Sec"

    def test_adjacent_headers_separated_by_one_blank_line(self):
        doc = Root(
            children=[
                Header(level=1, children=[Text(text="A")]),
                Header(level=2, children=[Text(text="B")]),
            ]
        )
        assert render(doc) == "= A\n\n== B"

    def test_header_anchor_renders_text(self):
        doc = Root(children=[Header(level=1, children=[AnchorLink(name="title", text="Title")])])
        assert render(doc) == "= Title"

    def test_paragraphs(self):
        doc = Root(children=[para(Text(text="one")), para(Text(text="two"))])
        assert render(doc) == "one\n\ntwo"

    def test_horizontal_rule(self):
        doc = Root(children=[para(Text(text="a")), Simple(kind="horizontal_rule"), para(Text(text="b"))])
        assert render(doc) == "a\n\n'''\n\nb"

    def test_multi_child_super_node_renders_children(self):
        doc = Root(children=[para(SuperNode(children=[Text(text="a"), Text(text="b")]))])
        assert render(doc) == "ab"

    def test_empty_document(self):
        assert render(Root()) == ""


@pytest.mark.unit
class TestBlockQuotes:
    """Tests for block quote fences."""

    def test_single_quote(self):
        doc = Root(children=[BlockQuote(children=[para(Text(text="q"))])])
        assert render(doc) == "____\n\nq\n\n____"

    def test_nested_quote_uses_wider_fence(self):
        doc = Root(children=[BlockQuote(children=[BlockQuote(children=[para(Text(text="q"))])])])
        assert render(doc) == "____\n\n________\n\nq\n\n________\n\n____"


@pytest.mark.unit
class TestLists:
    """Tests for bullet and ordered lists."""

    def test_bullet_list(self):
        doc = Root(
            children=[BulletList(children=[ListItem(children=[Text(text="a")]), ListItem(children=[Text(text="b")])])]
        )
        assert render(doc) == "* a\n* b"

    def test_ordered_list(self):
        doc = Root(
            children=[OrderedList(children=[ListItem(children=[Text(text="a")]), ListItem(children=[Text(text="b")])])]
        )
        assert render(doc) == ". a\n. b"

    def test_nested_lists_repeat_marker(self):
        inner = BulletList(children=[ListItem(children=[Text(text="b")])])
        doc = Root(children=[BulletList(children=[ListItem(children=[Text(text="a"), inner])])])
        assert render(doc) == "* a\n** b"

    def test_nested_ordered_inside_bullet(self):
        inner = OrderedList(children=[ListItem(children=[Text(text="b")])])
        outer = BulletList(
            children=[ListItem(children=[Text(text="a"), inner]), ListItem(children=[Text(text="c")])]
        )
        assert render(Root(children=[outer])) == "* a\n.. b\n* c"

    def test_first_paragraph_stays_on_marker_line(self):
        doc = Root(children=[BulletList(children=[ListItem(children=[para(Text(text="a"))])])])
        assert render(doc) == "* a"

    def test_single_child_wrapper_in_item_unwrapped(self):
        item = ListItem(children=[SuperNode(children=[Text(text="tight")])])
        assert render(Root(children=[BulletList(children=[item])])) == "* tight"


@pytest.mark.unit
class TestVerbatim:
    """Tests for code blocks and language guessing."""

    def test_explicit_language(self):
        doc = Root(children=[Verbatim(text="print(1)\n", language="python")])
        assert render(doc) == "[source,python]\n----\nprint(1)\n----"

    @pytest.mark.parametrize(
        "text,language",
        [
            ("<div/>", "html"),
            ("int x = 1;", "java"),
            ("fun main() {}", "kotlin"),
            ("println 'x'", "groovy"),
            ("<b>fun x;", "html"),
            ("val f = fun (x) = x;", "java"),
        ],
    )
    def test_language_guess(self, text, language):
        doc = Root(children=[Verbatim(text=text)])
        assert render(doc) == f"[source,{language}]\n----\n{text}\n----"

    def test_blank_language_is_guessed(self):
        doc = Root(children=[Verbatim(text="<p/>", language="  ")])
        assert render(doc).startswith("[source,html]")

    def test_default_language_option(self):
        doc = Root(children=[Verbatim(text="echo hi")])
        assert render(doc, default_language="shell").startswith("[source,shell]")

    def test_detection_disabled(self):
        doc = Root(children=[Verbatim(text="x")])
        assert render(doc, auto_detect_language=False) == "----\nx\n----"

    def test_content_is_not_escaped(self):
        doc = Root(children=[Verbatim(text="a < b && c\n", language="c")])
        assert "a < b && c" in render(doc)


@pytest.mark.unit
class TestHtmlBlocks:
    """Tests for raw HTML blocks."""

    def test_pass_through(self):
        doc = Root(children=[HtmlBlock(text="<div>hi</div>\n")])
        assert render(doc) == "<div>hi</div>"

    def test_drop(self):
        doc = Root(children=[para(Text(text="a")), HtmlBlock(text="<div>hi</div>\n")])
        assert render(doc, html_block_mode="drop") == "a"

    def test_empty_block(self):
        assert render(Root(children=[HtmlBlock(text="")])) == ""

    def test_table_converted(self):
        doc = Root(children=[HtmlBlock(text="<table><tr><th>A</th></tr><tr><td>1</td></tr></table>\n")])
        assert render(doc) == "|===\n|A\n\n|1\n|==="

    def test_table_converted_even_when_dropping(self):
        doc = Root(children=[HtmlBlock(text="<table><tr><td>1</td></tr></table>")])
        assert render(doc, html_block_mode="drop") == "|===\n|1\n|==="


@pytest.mark.unit
class TestDefinitionLists:
    """Tests for definition lists."""

    def test_term_and_definition(self):
        doc = Root(
            children=[
                DefinitionList(
                    children=[
                        DefinitionTerm(children=[Text(text="Term")]),
                        Definition(children=[Text(text="Meaning")]),
                    ]
                )
            ]
        )
        assert render(doc) == "Term::\n  Meaning"

    def test_multiple_terms(self):
        doc = Root(
            children=[
                DefinitionList(
                    children=[
                        DefinitionTerm(children=[Text(text="a")]),
                        Definition(children=[Text(text="x")]),
                        DefinitionTerm(children=[Text(text="b")]),
                        Definition(children=[Text(text="y")]),
                    ]
                )
            ]
        )
        assert render(doc) == "a::\n  x\nb::\n  y"


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_header_and_body_with_colspan(self):
        table = Table(
            columns=[TableColumn(), TableColumn()],
            children=[
                TableHeader(children=[TableRow(children=[cell("A"), cell("B")])]),
                TableBody(children=[TableRow(children=[cell("x"), cell("y", col_span=5)])]),
            ],
        )
        assert render(Root(children=[table])) == '|===\n|A |B\n\n|x | colspan="5"y\n|==='

    def test_alignment_spec(self):
        table = Table(
            columns=[TableColumn(alignment="left"), TableColumn(), TableColumn(alignment="right")],
            children=[TableHeader(children=[TableRow(children=[cell("A"), cell("B"), cell("C")])])],
        )
        assert render(Root(children=[table])) == '[cols="<,<,>"]\n|===\n|A |B |C\n\n|==='

    def test_center_alignment(self):
        table = Table(
            columns=[TableColumn(alignment="center")],
            children=[TableBody(children=[TableRow(children=[cell("x")])])],
        )
        assert render(Root(children=[table])).startswith('[cols="^"]')

    def test_no_spec_without_alignment(self):
        table = Table(columns=[TableColumn()], children=[TableBody(children=[TableRow(children=[cell("x")])])])
        assert render(Root(children=[table])) == "|===\n|x\n|==="

    def test_caption_becomes_block_title(self):
        table = Table(
            columns=[TableColumn()],
            children=[
                TableCaption(children=[Text(text="Results")]),
                TableBody(children=[TableRow(children=[cell("1")])]),
            ],
        )
        assert render(Root(children=[table])) == ".Results\n|===\n|1\n|==="

    def test_caption_rendered_with_table_as_parent(self):
        seen = []

        class RecordingRenderer(AsciiDocRenderer):
            def visit_table_caption(self, node):
                seen.append(self._parent)
                super().visit_table_caption(node)

        table = Table(
            columns=[TableColumn()],
            children=[
                TableCaption(children=[Text(text="Results")]),
                TableBody(children=[TableRow(children=[cell("1")])]),
            ],
        )
        output = RecordingRenderer().render_to_string(Root(children=[table]))
        assert output == ".Results\n|===\n|1\n|==="
        assert seen == [table]

    def test_table_without_columns(self):
        table = Table(children=[TableBody(children=[TableRow(children=[cell("x"), cell("y")])])])
        assert render(Root(children=[table])) == "|===\n|x |y\n|==="

    def test_cell_after_trailing_space(self):
        table = Table(
            columns=[TableColumn(), TableColumn()],
            children=[TableBody(children=[TableRow(children=[cell("a "), cell("b")])])],
        )
        assert render(Root(children=[table])) == "|===\n|a |b\n|==="

    def test_table_after_paragraph(self):
        table = Table(columns=[TableColumn()], children=[TableBody(children=[TableRow(children=[cell("x")])])])
        assert render(Root(children=[para(Text(text="intro")), table])) == "intro\n\n|===\n|x\n|==="


@pytest.mark.unit
class TestInline:
    """Tests for inline markup."""

    def test_emphasis(self):
        assert render(Root(children=[para(StrongEmphasis(is_strong=False, children=[Text(text="it")]))])) == "_it_"

    def test_unclosed_strong_prints_delimiters(self):
        node = StrongEmphasis(is_strong=True, is_closed=False, chars="**", children=[Text(text="x")])
        assert render(Root(children=[para(node)])) == "**x"

    def test_strikethrough(self):
        assert render(Root(children=[para(Strikethrough(children=[Text(text="gone")]))])) == "[line-through]#gone#"

    @pytest.mark.parametrize(
        "kind,expected", [("double", '"q"'), ("single", "'q'"), ("double_angle", "«q»")]
    )
    def test_quoted(self, kind, expected):
        assert render(Root(children=[para(Quoted(kind=kind, children=[Text(text="q")]))])) == expected

    @pytest.mark.parametrize(
        "kind,expected",
        [("apostrophe", "'"), ("ellipsis", "…"), ("emdash", "—"), ("endash", "–"), ("nbsp", "{nbsp}")],
    )
    def test_simple_text(self, kind, expected):
        assert render(Root(children=[para(Text(text="a"), Simple(kind=kind), Text(text="b"))])) == f"a{expected}b"

    def test_hard_line_break(self):
        doc = Root(children=[para(Text(text="a"), Simple(kind="line_break", hard=True), Text(text="b"))])
        assert render(doc) == "a +\nb"

    def test_soft_line_break(self):
        doc = Root(children=[para(Text(text="a"), Simple(kind="line_break"), Text(text="b"))])
        assert render(doc) == "a\nb"

    def test_line_break_classified_from_source(self):
        doc = Root(
            children=[para(Text(text="a"), Simple(kind="line_break", source_span=(1, 4)), Text(text="b"))]
        )
        assert AsciiDocRenderer().render_to_string(doc, "a  \nb") == "a +\nb"

    def test_inline_code_is_encoded(self):
        assert render(Root(children=[para(InlineCode(text="a<b"))])) == "`a&lt;b`"

    def test_special_text_is_encoded(self):
        assert render(Root(children=[para(SpecialText(text="&"))])) == "&amp;"

    def test_inline_html_unchanged(self):
        assert render(Root(children=[para(Text(text="a"), InlineHtml(text="<br/>"))])) == "a<br/>"

    def test_plain_text_unchanged_without_abbreviations(self):
        assert render(Root(children=[para(Text(text="a < b"))])) == "a < b"


@pytest.mark.unit
class TestLinks:
    """Tests for link rendering."""

    def _link(self, **kwargs: Any) -> str:
        return render(Root(children=[para(Link(**kwargs))]))

    def test_explicit_link(self):
        assert self._link(kind="explicit", url="http://x.io", children=[Text(text="X")]) == "http://x.io[X]"

    def test_relative_link_gets_macro(self):
        assert self._link(kind="explicit", url="page.html", children=[Text(text="Page")]) == "link:page.html[Page]"

    def test_anchor_becomes_cross_reference(self):
        assert self._link(kind="explicit", url="#intro", children=[Text(text="Intro")]) == "<<intro,Intro>>"

    def test_text_with_comma_is_quoted(self):
        result = self._link(kind="explicit", url="http://x.io", children=[Text(text="a, b")])
        assert result == 'http://x.io["a, b"]'

    def test_text_equal_to_url_omits_brackets(self):
        assert self._link(kind="explicit", url="http://x.io", children=[Text(text="http://x.io")]) == "http://x.io"

    def test_auto_link(self):
        assert self._link(kind="auto", url="http://x.io", children=[Text(text="http://x.io")]) == "http://x.io"

    def test_mail_link(self):
        assert self._link(kind="mail", url="a@b.io") == "link:mailto:a@b.io[a@b.io]"

    def test_wiki_link(self):
        assert self._link(kind="wiki", url="My Page") == "link:./My-Page.html[My Page]"

    def test_unknown_kind_raises(self):
        with pytest.raises(UnsupportedNodeError, match="link kind"):
            self._link(kind="bogus")


@pytest.mark.unit
class TestReferences:
    """Tests for reference links and images."""

    def _reference(self, **kwargs: Any) -> Link:
        return Link(kind="reference", children=[Text(text="Docs")], **kwargs)

    def test_reference_defined_after_use(self):
        doc = Root(
            children=[
                para(self._reference(reference_key=[Text(text="d")], separator_space="")),
                ReferenceDefinition(url="http://d.io", children=[Text(text="D")]),
            ]
        )
        assert render(doc) == "http://d.io[Docs]"

    def test_reference_defined_before_use(self):
        doc = Root(
            children=[
                ReferenceDefinition(url="http://d.io", children=[Text(text="d")]),
                para(self._reference(reference_key=[Text(text="D")], separator_space="")),
            ]
        )
        assert render(doc) == "http://d.io[Docs]"

    def test_implicit_key_uses_link_text(self):
        doc = Root(
            children=[
                para(self._reference()),
                ReferenceDefinition(url="http://d.io", children=[Text(text="docs")]),
            ]
        )
        assert render(doc) == "http://d.io[Docs]"

    def test_unresolved_without_key(self):
        assert render(Root(children=[para(self._reference())])) == "[Docs]"

    def test_unresolved_with_key(self):
        doc = Root(children=[para(self._reference(reference_key=[Text(text="k")], separator_space=" "))])
        assert render(doc) == "[Docs] [k]"

    def test_unresolved_with_empty_brackets(self):
        assert render(Root(children=[para(self._reference(separator_space=""))])) == "[Docs][]"

    def test_definitions_produce_no_output(self):
        doc = Root(
            children=[
                ReferenceDefinition(url="http://d.io", children=[Text(text="d")]),
                AbbreviationDefinition(children=[Text(text="X")], expansion=[Text(text="ex")]),
            ]
        )
        assert render(doc) == ""

    def test_reference_image(self):
        doc = Root(
            children=[
                para(Image(kind="reference", reference_key=[Text(text="img")], children=[Text(text="logo")])),
                ReferenceDefinition(url="logo.png", children=[Text(text="img")]),
            ]
        )
        assert render(doc) == "image:logo.png[logo]"

    def test_unresolved_reference_image(self):
        doc = Root(children=[para(Image(kind="reference", children=[Text(text="logo")]))])
        assert render(doc) == "![logo]"

    def test_definitions_do_not_leak_between_renders(self):
        renderer = AsciiDocRenderer()
        first = Root(
            children=[para(self._reference()), ReferenceDefinition(url="http://d.io", children=[Text(text="docs")])]
        )
        assert renderer.render_to_string(first) == "http://d.io[Docs]"
        assert renderer.render_to_string(Root(children=[para(self._reference())])) == "[Docs]"


@pytest.mark.unit
class TestImages:
    """Tests for image rendering."""

    def test_image(self):
        doc = Root(children=[para(Image(kind="explicit", url="pic.png", children=[Text(text="logo")]))])
        assert render(doc) == "image:pic.png[logo]"

    def test_alt_with_comma_is_quoted(self):
        doc = Root(children=[para(Image(kind="explicit", url="pic.png", children=[Text(text="a, b")]))])
        assert render(doc) == 'image:pic.png["a, b"]'

    def test_image_inside_link(self):
        image = Image(kind="explicit", url="pic.png", children=[Text(text="logo")])
        doc = Root(children=[para(Link(kind="explicit", url="http://site", children=[image]))])
        assert render(doc) == "image:pic.png[logo,link=http://site]"

    def test_image_without_alt_inside_link(self):
        image = Image(kind="explicit", url="pic.png")
        doc = Root(children=[para(Link(kind="explicit", url="http://site", children=[image]))])
        assert render(doc) == "image:pic.png[link=http://site]"

    def test_image_inside_reference_link(self):
        image = Image(kind="explicit", url="pic.png", children=[Text(text="logo")])
        link = Link(kind="reference", reference_key=[Text(text="s")], separator_space="", children=[image])
        doc = Root(children=[para(link), ReferenceDefinition(url="http://site", children=[Text(text="s")])])
        assert render(doc) == "image:pic.png[logo,link=http://site]"


@pytest.mark.unit
class TestAbbreviations:
    """Tests for abbreviation annotation in text."""

    def test_whole_word_substitution(self):
        doc = Root(
            children=[
                para(Text(text="Our API is REST; MyAPIX is not.")),
                AbbreviationDefinition(
                    children=[Text(text="API")], expansion=[Text(text="Application Programming Interface")]
                ),
            ]
        )
        assert render(doc) == (
            'Our <abbr title="Application Programming Interface">API</abbr> is REST; MyAPIX is not.'
        )

    def test_expansion_markup_rendered(self):
        doc = Root(
            children=[
                para(Text(text="X")),
                AbbreviationDefinition(
                    children=[Text(text="X")], expansion=[StrongEmphasis(is_strong=True, children=[Text(text="Big")])]
                ),
            ]
        )
        assert render(doc) == '<abbr title="*Big*">X</abbr>'

    def test_expansions_are_not_annotated(self):
        doc = Root(
            children=[
                para(Text(text="A B")),
                AbbreviationDefinition(children=[Text(text="A")], expansion=[Text(text="B thing")]),
                AbbreviationDefinition(children=[Text(text="B")], expansion=[Text(text="bee")]),
            ]
        )
        assert render(doc) == '<abbr title="B thing">A</abbr> <abbr title="bee">B</abbr>'

    def test_collision_policy_option(self):
        doc = Root(
            children=[
                para(Text(text="W3 C")),
                AbbreviationDefinition(children=[Text(text="W3 C")], expansion=[Text(text="long")]),
                AbbreviationDefinition(children=[Text(text="W3")], expansion=[Text(text="short")]),
            ]
        )
        assert render(doc) == '<abbr title="long">W3 C</abbr>'
        assert render(doc, abbreviation_collision="last") == '<abbr title="short">W3</abbr> C'


class _UnknownNode(Node):
    def accept(self, visitor: Any) -> Any:
        return visitor.generic_visit(self)


@pytest.mark.unit
class TestErrors:
    """Tests for error handling."""

    def test_unknown_node_raises(self):
        with pytest.raises(UnsupportedNodeError) as exc_info:
            render(Root(children=[para(_UnknownNode())]))
        assert exc_info.value.node_type == "_UnknownNode"

    def test_non_node_child_raises(self):
        with pytest.raises(UnsupportedNodeError, match="str"):
            render(Root(children=["raw text"]))  # type: ignore[list-item]

    def test_unknown_simple_kind_raises(self):
        with pytest.raises(UnsupportedNodeError, match="simple node kind"):
            render(Root(children=[para(Simple(kind="bogus"))]))  # type: ignore[arg-type]

    def test_renderer_usable_after_error(self):
        renderer = AsciiDocRenderer()
        with pytest.raises(UnsupportedNodeError):
            renderer.render_to_string(Root(children=[_UnknownNode()]))
        assert renderer.render_to_string(Root(children=[para(Text(text="ok"))])) == "ok"

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            AsciiDocRenderer(MarkdownParserOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestOutput:
    """Tests for writing rendered output and blank-line collapsing."""

    def test_collapse_blank_lines(self):
        assert collapse_blank_lines("\n\na\n\n\n\nb\n\n") == "a\n\nb"

    def test_collapse_whitespace_only_lines(self):
        assert collapse_blank_lines("a\n   \n\n\nb") == "a\n\nb"

    def test_single_blank_line_kept(self):
        assert collapse_blank_lines("a\n\nb") == "a\n\nb"

    def test_render_to_path(self, tmp_path):
        path = tmp_path / "out.adoc"
        AsciiDocRenderer().render(Root(children=[para(Text(text="hi"))]), path)
        assert path.read_text(encoding="utf-8") == "hi"

    def test_render_to_text_stream(self):
        stream = io.StringIO()
        AsciiDocRenderer().render(Root(children=[para(Text(text="hi"))]), stream)
        assert stream.getvalue() == "hi"

    def test_render_to_binary_stream(self):
        stream = io.BytesIO()
        AsciiDocRenderer().render(Root(children=[para(Text(text="é"))]), stream)
        assert stream.getvalue() == "é".encode("utf-8")

    def test_render_to_unsupported_target(self):
        with pytest.raises(TypeError):
            AsciiDocRenderer().render(Root(), 42)  # type: ignore[arg-type]
