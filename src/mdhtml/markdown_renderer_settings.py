"""Settings that control how markdown is rendered."""

from dataclasses import dataclass
import json
from typing import Any, Dict

from mdhtml.markdown_exceptions import MarkdownSettingsError


@dataclass(frozen=True)
class MarkdownRendererSettings:
    """
    Renderer settings.

    Instances are immutable so a single renderer can be shared between threads.
    """
    no_underscores: bool = False
    unchecked_task_marker: str = "☐"
    checked_task_marker: str = "☑"

    def __post_init__(self) -> None:
        if not isinstance(self.no_underscores, bool):
            raise MarkdownSettingsError(
                "no_underscores must be a boolean",
                {"field": "no_underscores", "value": self.no_underscores}
            )

        for field_name in ("unchecked_task_marker", "checked_task_marker"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise MarkdownSettingsError(
                    f"{field_name} must be a non-empty string",
                    {"field": field_name, "value": value}
                )

    @classmethod
    def create_default(cls) -> "MarkdownRendererSettings":
        """Create a settings object with the default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarkdownRendererSettings":
        """
        Create settings from a dictionary, using defaults for missing keys.

        Args:
            data: Dictionary of settings values, using camelCase keys as stored on disk

        Returns:
            MarkdownRendererSettings object with the given values

        Raises:
            MarkdownSettingsError: If the data is not a dictionary or a value is invalid
        """
        if not isinstance(data, dict):
            raise MarkdownSettingsError("Settings must be a JSON object", {"type": type(data).__name__})

        defaults = cls.create_default()
        return cls(
            no_underscores=data.get("noUnderscores", defaults.no_underscores),
            unchecked_task_marker=data.get("uncheckedTaskMarker", defaults.unchecked_task_marker),
            checked_task_marker=data.get("checkedTaskMarker", defaults.checked_task_marker)
        )

    @classmethod
    def load(cls, path: str) -> "MarkdownRendererSettings":
        """
        Load renderer settings from file.

        Args:
            path: Path to the settings file

        Returns:
            MarkdownRendererSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            MarkdownSettingsError: If a settings value is invalid
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """
        Save renderer settings to file.

        Args:
            path: Path to the settings file
        """
        data = {
            "noUnderscores": self.no_underscores,
            "uncheckedTaskMarker": self.unchecked_task_marker,
            "checkedTaskMarker": self.checked_task_marker
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4, ensure_ascii=False)
