"""Persistence of the last used generator options."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from mvp_creator.components.types import PersistedPreferences
from mvp_creator.constants import DEFAULT_PREFERENCES_FILE
from mvp_creator.errors import PreferenceError

logger = logging.getLogger(__name__)


class PreferenceStore(ABC):
    """Key-value store scoped to one project."""

    @abstractmethod
    def load(self) -> PersistedPreferences:
        pass

    @abstractmethod
    def save(self, preferences: PersistedPreferences) -> None:
        pass


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self, preferences: PersistedPreferences = None):
        self.preferences = preferences or PersistedPreferences()

    def load(self) -> PersistedPreferences:
        return self.preferences.model_copy()

    def save(self, preferences: PersistedPreferences) -> None:
        self.preferences = preferences.model_copy()


class JsonPreferenceStore(PreferenceStore):
    """Preferences kept as a JSON document in the project root.

    The document uses the same keys the IDE action stores, e.g.
    ``{"mvp_creator_last_package": "com.app.bluetooth", "mvp_creator_last_base_option": true}``.
    """

    def __init__(self, project_root: Path, file_name: str = DEFAULT_PREFERENCES_FILE):
        self.path = Path(project_root) / file_name

    def load(self) -> PersistedPreferences:
        if not self.path.exists():
            return PersistedPreferences()
        try:
            data = PersistedPreferences.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return PersistedPreferences()
        return data

    def save(self, preferences: PersistedPreferences) -> None:
        try:
            self.path.write_text(preferences.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as e:
            raise PreferenceError(f"Failed to save preferences to {self.path}: {e}") from e
        logger.debug("Saved preferences to %s", self.path)
