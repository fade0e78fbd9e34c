"""
Persisted UI preferences.

Only the theme is stored, as a single ``theme`` key in a YAML file.
"""

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
DEFAULT_THEME = "light"
DEFAULT_PREFERENCES_FILE = Path("~/.config/slurm-form/preferences.yml")


class ThemePreference:
    """Theme preference stored in a YAML file."""

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            path = DEFAULT_PREFERENCES_FILE
        self.path = Path(path).expanduser()
        self.theme = DEFAULT_THEME

    def load(self) -> str:
        """
        Read the saved theme.

        Returns:
            The saved theme, or "light" if none is saved or it is invalid.
        """
        self.theme = self._read()
        return self.theme

    def _read(self) -> str:
        if not self.path.exists():
            return DEFAULT_THEME
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return DEFAULT_THEME
        if not isinstance(data, dict) or data.get("theme") not in THEMES:
            return DEFAULT_THEME
        return data["theme"]

    def set(self, theme: str) -> None:
        """
        Save a theme.

        Args:
            theme: "light" or "dark".

        Raises:
            ValueError: If theme is not a known theme.
        """
        if theme not in THEMES:
            raise ValueError(
                f"Invalid theme '{theme}'. Must be one of: {', '.join(THEMES)}"
            )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"theme": theme}, f)
        self.theme = theme
        logger.info("Saved theme '%s' to %s", theme, self.path)

    def toggle(self, checked: bool) -> str:
        """Save the theme for a toggle state (checked means dark)."""
        theme = "dark" if checked else "light"
        self.set(theme)
        return theme

    @property
    def is_dark(self) -> bool:
        """Whether the theme toggle is checked."""
        return self.theme == "dark"
