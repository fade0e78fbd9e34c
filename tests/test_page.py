"""Tests for page module."""

from slurm_form.actions import RenderedScript
from slurm_form.page import render_page


class TestRenderPage:
    """Tests for render_page function."""

    def test_light_theme(self) -> None:
        """Test the light theme attribute and unchecked toggle."""
        html = render_page(RenderedScript(raw="#!/bin/bash\n"))
        assert '<html lang="en" data-theme="light">' in html
        assert '<input type="checkbox" id="theme-toggle" />' in html

    def test_dark_theme(self) -> None:
        """Test the dark theme attribute and checked toggle."""
        html = render_page(RenderedScript(raw="#!/bin/bash\n"), theme="dark")
        assert 'data-theme="dark"' in html
        assert '<input type="checkbox" id="theme-toggle" checked />' in html

    def test_unknown_theme(self) -> None:
        """Test that unknown themes fall back to light."""
        html = render_page(RenderedScript(raw=""), theme="neon")
        assert 'data-theme="light"' in html

    def test_script_escaped(self) -> None:
        """Test that the script is shown escaped."""
        raw = "echo '<script>alert(1)</script>' > out\n"
        html = render_page(RenderedScript(raw=raw))
        assert "<script>" not in html
        assert (
            '<pre id="output"><code>echo &#039;&lt;script&gt;alert(1)'
            "&lt;/script&gt;&#039; &gt; out\n</code></pre>"
        ) in html

    def test_title_escaped(self) -> None:
        """Test that the title is escaped."""
        html = render_page(RenderedScript(raw=""), title="<b>job</b>")
        assert "<title>&lt;b&gt;job&lt;/b&gt;</title>" in html
