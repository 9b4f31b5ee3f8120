"""
Tests for rendering question titles to HTML.
"""

from quiz_runner.core.markdown_math_renderer import MarkdownMathRenderer


class TestMarkdownMathRenderer:

    def test_renders_markdown(self):
        html = MarkdownMathRenderer().render_fragment("Capital of **Norway**?")
        assert "<strong>Norway</strong>" in html

    def test_empty_text_has_placeholder(self):
        assert MarkdownMathRenderer().render_fragment("   ") == "<p><em>No question text.</em></p>"

    def test_math_delimiters_survive(self):
        html = MarkdownMathRenderer().render_fragment("Solve $x^2 = 4$")
        assert "$x^2 = 4$" in html

    def test_raw_html_is_escaped_by_default(self):
        html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")
        assert "<script>" not in html

    def test_full_document_wraps_fragment(self):
        document = MarkdownMathRenderer().render_full_document(
            "# Title", title="Quiz <1>", font_size=18
        )
        assert document.startswith("<!doctype html>")
        assert "<title>Quiz &lt;1&gt;</title>" in document
        assert "font-size: 18pt" in document
        assert "MathJax" in document
        assert "<h1>Title</h1>" in document
