"""Tests for alias_generator.platform."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

import alias_generator.platform as plat


class TestDefaultRegistryDir:
    def test_windows(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", True)
        assert plat.default_registry_dir() == Path("C:\\Cmd_Aliases\\")

    def test_posix(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", False)
        assert plat.default_registry_dir() == Path.home() / ".cmd_aliases"


class TestRegistryDirString:
    def test_adds_trailing_separator(self, tmp_path):
        assert plat.registry_dir_string(tmp_path) == str(tmp_path) + os.sep

    def test_keeps_existing_separator(self):
        assert plat.registry_dir_string(Path(os.sep)) == os.sep


class TestBootstrapCommand:
    def test_prefers_exe_launcher(self, monkeypatch, tmp_path):
        exe = tmp_path / "alias-generator.exe"
        exe.write_text("")
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "alias-generator")])
        assert plat.bootstrap_command() == f'"{exe.resolve()}" %*'

    def test_falls_back_to_module(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "__main__.py")])
        assert plat.bootstrap_command() == f'"{sys.executable}" -m alias_generator %*'

    def test_always_forwards_arguments(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", [])
        assert plat.bootstrap_command().endswith(" %*")


class TestSearchPath:
    def test_reads_variable(self, monkeypatch):
        monkeypatch.setenv("ALIAS_GENERATOR_TEST_PATH", "a;b")
        assert plat.read_search_path("ALIAS_GENERATOR_TEST_PATH") == "a;b"

    @pytest.mark.skipif(sys.platform == "win32", reason="environment is case-insensitive")
    def test_falls_back_to_upper_case(self, monkeypatch):
        monkeypatch.delenv("Shim_Test_Path", raising=False)
        monkeypatch.setenv("SHIM_TEST_PATH", "x;y")
        assert plat.read_search_path("Shim_Test_Path") == "x;y"

    def test_unset_is_empty(self, monkeypatch):
        monkeypatch.delenv("ALIAS_GENERATOR_UNSET", raising=False)
        assert plat.read_search_path("alias_generator_unset") == ""

    def test_add_to_user_path_is_windows_only(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", False)
        assert plat.add_to_user_path("C:\\Cmd_Aliases\\", "Path", ";") is False


class TestInstructions:
    def test_windows_mentions_directory(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", True)
        lines = plat.path_instructions("C:\\Cmd_Aliases\\")
        assert any("C:\\Cmd_Aliases\\" in line for line in lines)
        assert any("Environment Variables" in line for line in lines)

    def test_posix_gives_export_line(self, monkeypatch):
        monkeypatch.setattr(plat, "IS_WINDOWS", False)
        lines = plat.path_instructions("/home/u/.cmd_aliases/")
        assert any('export PATH="$PATH:/home/u/.cmd_aliases/"' in line for line in lines)
