"""Persisted light/dark theme preference."""

from weather_lookup.constants import THEME_STORAGE_KEY
from weather_lookup.models.preferences import Theme
from weather_lookup.utils.storage import KeyValueStorage


class ThemePreference:
    """Reads and flips the theme stored under a single key."""

    def __init__(self, storage: KeyValueStorage, key: str = THEME_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> Theme:
        """Return the stored theme, light when unset or unrecognized."""
        return Theme.DARK if self.storage.get(self.key) == Theme.DARK.value else Theme.LIGHT

    def save(self, theme: Theme) -> None:
        self.storage.set(self.key, theme.value)

    def toggle(self) -> Theme:
        """Switch to the other theme and persist it.

        Returns:
            The newly active theme.
        """
        theme = self.load().toggled
        self.save(theme)
        return theme
