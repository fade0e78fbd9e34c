"""HTML preview page for a rendered script."""

from slurm_form.actions import RenderedScript
from slurm_form.preferences import DEFAULT_THEME, THEMES
from slurm_form.script.escaping import escape_html

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en" data-theme="{theme}">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title}</title>
  <style>
    :root, [data-theme="light"] {{ --bg: #ffffff; --fg: #1e2330; --panel: #f5f6f8; }}
    [data-theme="dark"] {{ --bg: #0a0c10; --fg: #c8ced8; --panel: #1c2129; }}
    body {{ background: var(--bg); color: var(--fg); font-family: system-ui, sans-serif; }}
    pre {{ background: var(--panel); padding: 1rem; overflow-x: auto; }}
  </style>
</head>
<body>
  <label class="theme-switch">
    <input type="checkbox" id="theme-toggle"{checked} /> Dark mode
  </label>
  <pre id="output">{output}</pre>
</body>
</html>
"""


def render_page(
    rendered: RenderedScript, theme: str = DEFAULT_THEME, title: str = "Slurm Script"
) -> str:
    """
    Render a standalone HTML page showing the script.

    Args:
        rendered: Script to show; only its display form is used.
        theme: "light" or "dark". Unknown values fall back to light.
        title: Page title, HTML-escaped before use.

    Returns:
        HTML document text.
    """
    if theme not in THEMES:
        theme = DEFAULT_THEME
    return PAGE_TEMPLATE.format(
        theme=theme,
        title=escape_html(title),
        checked=" checked" if theme == "dark" else "",
        output=rendered.display,
    )
