"""Tests for alias_generator.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from alias_generator.preferences import (
    CONFIG_ENV_VAR,
    PREFS_PATH,
    Preferences,
    load_preferences,
    preferences_path,
)


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.registry.directory == ""
        assert prefs.registry.extension == ".cmd"
        assert prefs.registry.preamble == "@echo off"
        assert prefs.path.variable == "Path"
        assert prefs.path.separator == os.pathsep
        assert prefs.prompts.assume_yes is False

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["registry"]["extension"] == ".cmd"
        assert data["prompts"]["assume_yes"] is False

    def test_default_file_loads_back_to_defaults(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()


class TestLoadPreferencesFromFile:
    def test_reads_every_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text(
            "registry:\n"
            "  directory: 'D:\\Shims\\'\n"
            "  extension: '.bat'\n"
            "  preamble: '@rem shim'\n"
            "path:\n"
            "  variable: PATH\n"
            "  separator: ':'\n"
            "prompts:\n"
            "  assume_yes: true\n"
        )
        prefs = load_preferences(path)
        assert prefs.registry.directory == "D:\\Shims\\"
        assert prefs.registry.extension == ".bat"
        assert prefs.registry.preamble == "@rem shim"
        assert prefs.path.variable == "PATH"
        assert prefs.path.separator == ":"
        assert prefs.prompts.assume_yes is True

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("prompts:\n  assume_yes: true\n")
        prefs = load_preferences(path)
        assert prefs.prompts.assume_yes is True
        assert prefs.registry.extension == ".cmd"

    def test_empty_separator_keeps_platform_default(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("path:\n  separator: ''\n")
        assert load_preferences(path).path.separator == os.pathsep

    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("registry: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()


class TestResolvedDirectory:
    def test_explicit_directory(self, tmp_path: Path):
        prefs = Preferences()
        prefs.registry.directory = str(tmp_path / "shims")
        assert prefs.registry.resolved_directory == tmp_path / "shims"

    def test_expands_user(self):
        prefs = Preferences()
        prefs.registry.directory = "~/shims"
        assert prefs.registry.resolved_directory == Path.home() / "shims"

    def test_empty_uses_platform_default(self, monkeypatch, tmp_path: Path):
        monkeypatch.setattr(
            "alias_generator.preferences.default_registry_dir", lambda: tmp_path / "default"
        )
        assert Preferences().registry.resolved_directory == tmp_path / "default"


class TestPreferencesPath:
    def test_override_wins(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert preferences_path(tmp_path / "cli.yaml") == tmp_path / "cli.yaml"

    def test_env_var(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert preferences_path() == tmp_path / "env.yaml"

    def test_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert preferences_path() == PREFS_PATH
