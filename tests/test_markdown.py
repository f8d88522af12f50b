"""Tests for the HTML to Markdown serializer."""

from __future__ import annotations

from hyprdocs.markdown import convert_fragment_to_markdown

BASE = "https://wiki.example.org/Configuring/"


class TestConvertFragmentToMarkdown:
    """Tests for convert_fragment_to_markdown function."""

    def test_paragraphs_are_separated(self) -> None:
        result = convert_fragment_to_markdown("<p>one</p>\n<p>two</p>", link_base=BASE)

        assert result == "one\n\ntwo"

    def test_inline_formatting(self) -> None:
        result = convert_fragment_to_markdown(
            "<p>Use <code>exec</code> with <strong>care</strong> and <em>style</em>.</p>",
            link_base=BASE,
        )

        assert result == "Use `exec` with **care** and *style*."

    def test_relative_links_are_rewritten(self) -> None:
        result = convert_fragment_to_markdown(
            '<p>See <a href="../Variables/#general">general</a>.</p>', link_base=BASE
        )

        assert result == f"See [general]({BASE}Variables/#general)."

    def test_absolute_and_fragment_links_are_kept(self) -> None:
        result = convert_fragment_to_markdown(
            '<p><a href="https://hypr.land">site</a> <a href="#rules">rules</a></p>',
            link_base=BASE,
        )

        assert result == "[site](https://hypr.land) [rules](#rules)"

    def test_lists(self) -> None:
        result = convert_fragment_to_markdown(
            "<ul><li>a<ul><li>b</li></ul></li><li>c</li></ul><ol><li>x</li><li>y</li></ol>",
            link_base=BASE,
        )

        assert result == "- a\n  - b\n- c\n\n1. x\n2. y"

    def test_code_block_keeps_language(self) -> None:
        result = convert_fragment_to_markdown(
            '<pre><code class="language-ini">bind = SUPER, Q, exec, kitty\n</code></pre>',
            link_base=BASE,
        )

        assert result == "```ini\nbind = SUPER, Q, exec, kitty\n```"

    def test_headings_and_tables(self) -> None:
        result = convert_fragment_to_markdown(
            "<h3>Flags</h3><table><tr><th>flag</th><th>meaning</th></tr>"
            "<tr><td>l</td><td>locked</td></tr></table>",
            link_base=BASE,
        )

        assert result == "### Flags\n\n| flag | meaning |\n| --- | --- |\n| l | locked |"

    def test_table_cells_keep_links_and_escape_pipes(self) -> None:
        result = convert_fragment_to_markdown(
            "<table><tr><th>name</th><th>description</th><th>type</th></tr>"
            '<tr><td>col</td><td>see <a href="../Variables/#colors">colors</a></td></tr>'
            "<tr><td>a|b</td><td><code>x</code></td><td>str</td></tr></table>",
            link_base=BASE,
        )

        assert result.splitlines() == [
            "| name | description | type |",
            "| --- | --- | --- |",
            f"| col | see [colors]({BASE}Variables/#colors) |  |",
            "| a\\|b | `x` | str |",
        ]

    def test_blockquote(self) -> None:
        result = convert_fragment_to_markdown(
            "<blockquote><p>Note one</p><p>Note two</p></blockquote>", link_base=BASE
        )

        assert result == "> Note one\n>\n> Note two"

    def test_empty_fragment(self) -> None:
        assert convert_fragment_to_markdown("", link_base=BASE) == ""
