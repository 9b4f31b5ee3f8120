"""Markdown + LaTeX rendering for question titles.

Question titles are authored as Markdown with ``$...$`` / ``$$...$$`` math.
They are rendered to HTML here and typeset by MathJax inside the Qt web view.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

from quiz_runner.constants.about import APP_NAME

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("table")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No question text.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(self, body_html: str, title: str = APP_NAME, font_size: int = 14) -> str:
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; font-size: {font_size}pt; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }} }};
    </script>
    <script defer src="{_MATHJAX_SCRIPT}"></script>
  </head>
  <body>
    <div class="question-html">{body_html}</div>
  </body>
</html>"""

    def render_full_document(
        self, markdown_text: str, title: str = APP_NAME, font_size: int = 14
    ) -> str:
        return self.wrap_with_mathjax(
            self.render_fragment(markdown_text), title=title, font_size=font_size
        )


# Shared instance; only used from the Qt thread.
renderer = MarkdownMathRenderer()
