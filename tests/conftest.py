"""Shared test fixtures for the alias-generator test suite."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from alias_generator.app import AliasApp
from alias_generator.persistence import AliasRegistry
from alias_generator.preferences import Preferences

TEST_PATH_VARIABLE = "ALIAS_GENERATOR_TEST_PATH"


class FakeLookup:
    """System-command lookup over a fixed set of names."""

    def __init__(self, names=("echo", "dir", "git", "notepad")) -> None:
        self.names = set(names)

    def __call__(self, name: str) -> bool:
        return name in self.names


class ScriptedPrompts:
    """Replays canned answers for confirm/ask and records the questions."""

    def __init__(self, confirms=(), answers=()) -> None:
        self.confirms = list(confirms)
        self.answers = list(answers)
        self.questions: list[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.confirms.pop(0) if self.confirms else False

    def ask(self, prompt: str) -> str:
        self.questions.append(prompt)
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """An empty current directory so name checks never hit real files."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def registry_dir(tmp_path: Path) -> Path:
    return tmp_path / "Cmd_Aliases"


@pytest.fixture
def registry(registry_dir: Path) -> AliasRegistry:
    registry_dir.mkdir()
    return AliasRegistry(registry_dir)


@pytest.fixture
def prefs(registry_dir: Path) -> Preferences:
    prefs = Preferences()
    prefs.registry.directory = str(registry_dir)
    prefs.path.variable = TEST_PATH_VARIABLE
    prefs.path.separator = ";"
    return prefs


@pytest.fixture
def on_path(registry_dir: Path, monkeypatch) -> None:
    """Put the registry directory on the test search-path variable."""
    monkeypatch.setenv(TEST_PATH_VARIABLE, f"C:\\Windows;{registry_dir};C:\\Tools;")


@pytest.fixture
def make_app(prefs: Preferences, workdir: Path):
    """Factory returning ``(app, prompts, output)`` for scripted runs."""

    def _make(confirms=(), answers=(), lookup=None):
        prompts = ScriptedPrompts(confirms, answers)
        output = io.StringIO()
        console = Console(file=output, width=200, color_system=None)
        app = AliasApp(
            prefs,
            console=console,
            confirm=prompts.confirm,
            ask=prompts.ask,
            is_system_command=lookup or FakeLookup(),
        )
        return app, prompts, output

    return _make
