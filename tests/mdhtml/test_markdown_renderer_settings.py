"""
Tests for renderer settings
"""
import json

import pytest

from mdhtml import MarkdownRendererSettings, MarkdownSettingsError


class TestMarkdownRendererSettings:
    """Tests for the MarkdownRendererSettings class."""

    def test_defaults(self):
        """Test the default settings values."""
        settings = MarkdownRendererSettings.create_default()
        assert settings.no_underscores is False
        assert settings.unchecked_task_marker == "☐"
        assert settings.checked_task_marker == "☑"

    def test_settings_are_immutable(self):
        """Test settings cannot be changed after creation."""
        settings = MarkdownRendererSettings()
        with pytest.raises(AttributeError):
            settings.no_underscores = True  # type: ignore[misc]

    def test_from_dict(self):
        """Test creating settings from a dictionary with camelCase keys."""
        settings = MarkdownRendererSettings.from_dict({"noUnderscores": True, "checkedTaskMarker": "x"})
        assert settings.no_underscores is True
        assert settings.checked_task_marker == "x"
        assert settings.unchecked_task_marker == "☐"

    def test_from_dict_rejects_non_object(self):
        """Test that settings data must be a dictionary."""
        with pytest.raises(MarkdownSettingsError) as exc_info:
            MarkdownRendererSettings.from_dict(["noUnderscores"])  # type: ignore[arg-type]

        assert exc_info.value.error_details == {"type": "list"}

    @pytest.mark.parametrize("kwargs,field", [
        ({"no_underscores": "yes"}, "no_underscores"),
        ({"unchecked_task_marker": ""}, "unchecked_task_marker"),
        ({"checked_task_marker": 1}, "checked_task_marker"),
    ])
    def test_invalid_values(self, kwargs, field):
        """Test invalid values are rejected."""
        with pytest.raises(MarkdownSettingsError) as exc_info:
            MarkdownRendererSettings(**kwargs)

        assert exc_info.value.error_details["field"] == field

    def test_load(self, tmp_path):
        """Test loading settings from a JSON file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"noUnderscores": True, "uncheckedTaskMarker": "[ ]"}), encoding="utf-8")

        settings = MarkdownRendererSettings.load(str(path))
        assert settings.no_underscores is True
        assert settings.unchecked_task_marker == "[ ]"
        assert settings.checked_task_marker == "☑"

    def test_save_and_load(self, tmp_path):
        """Test saved settings load back unchanged."""
        path = tmp_path / "settings.json"
        settings = MarkdownRendererSettings(no_underscores=True, checked_task_marker="✓")
        settings.save(str(path))

        assert json.loads(path.read_text(encoding="utf-8"))["checkedTaskMarker"] == "✓"
        assert MarkdownRendererSettings.load(str(path)) == settings

    def test_load_invalid_json(self, tmp_path):
        """Test invalid JSON is reported as a decode error."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            MarkdownRendererSettings.load(str(path))

    def test_load_invalid_value(self, tmp_path):
        """Test an invalid value in the file is rejected."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"noUnderscores": "no"}), encoding="utf-8")

        with pytest.raises(MarkdownSettingsError):
            MarkdownRendererSettings.load(str(path))
