"""Unit tests for render dispatch."""

import pytest

from cms.kernel.documents.render import RenderMode, render_markdown, render_mode_for


@pytest.mark.parametrize("name,mode", [
    ("about.md", RenderMode.MARKDOWN),
    ("ABOUT.MD", RenderMode.MARKDOWN),
    ("guide.markdown", RenderMode.MARKDOWN),
    ("changes.txt", RenderMode.PLAIN_TEXT),
    ("data.csv", RenderMode.PLAIN_TEXT),
    ("README", RenderMode.PLAIN_TEXT),
])
def test_render_mode_for(name, mode):
    assert render_mode_for(name) is mode


def test_render_markdown_heading():
    html = render_markdown("# 1993 - Yukihiro Matsumoto dreams up Ruby.")
    assert "<h1>1993 - Yukihiro Matsumoto dreams up Ruby.</h1>" in html


def test_render_markdown_emphasis():
    assert render_markdown("some *emphasis*") == "<p>some <em>emphasis</em></p>"
