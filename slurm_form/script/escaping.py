"""
Escaping helpers for generated scripts.

Two separate disciplines are used: shell escaping for values placed
inside single quotes in the script, and HTML escaping for the finished
script when it is shown in a page.
"""

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_shell(text: object) -> str:
    """
    Escape a value for use inside a single-quoted shell string.

    The caller supplies the surrounding quotes, e.g. ``f"'{escape_shell(v)}'"``.

    Args:
        text: Value to escape. Empty or None values produce "".

    Returns:
        Value with every single quote replaced by ``'\\''``.
    """
    if not text:
        return ""
    return str(text).replace("'", "'\\''")


def escape_html(text: str) -> str:
    """
    Escape HTML special characters for display in a page.

    Args:
        text: Text to escape.

    Returns:
        Text with &, <, >, " and ' replaced by character references.
    """
    return text.translate(_HTML_ESCAPES)
