"""Display preferences persisted in a key-value slot."""

from contactbook.application.ports import KeyValueSlot
from contactbook.domain import THEMES

THEME_KEY = "theme"


class PreferencesStore:
    """Holds the colour theme. Writes through to the slot on every change."""

    def __init__(self, slot: KeyValueSlot, *, prefers_dark: bool = False) -> None:
        self._slot = slot
        self._theme = self._read_theme() or ("dark" if prefers_dark else "light")

    @property
    def theme(self) -> str:
        return self._theme

    def set_theme(self, theme: str) -> str:
        if theme not in THEMES:
            raise ValueError(f"Theme must be one of {', '.join(THEMES)}.")
        self._theme = theme
        self._slot.write(THEME_KEY, theme.encode("utf-8"))
        return theme

    def toggle_theme(self) -> str:
        return self.set_theme("dark" if self._theme == "light" else "light")

    def _read_theme(self) -> str | None:
        try:
            raw = self._slot.read(THEME_KEY)
        except OSError:
            return None
        if raw is None:
            return None
        try:
            theme = raw.decode("utf-8").strip()
        except UnicodeDecodeError:
            return None
        return theme if theme in THEMES else None
