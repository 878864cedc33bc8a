"""
Unit tests for the shell exporter and the export map type.
"""

import io
import os

import pytest

import p1stream_env.builder as builder_module
from p1stream_env import (
    ConfigEntry,
    ConfigMap,
    ConfigurationError,
    build_config,
    export_shell,
    format_export_line,
    render_exports,
)


class TestConfigMap:
    """Test ConfigMap invariants."""

    def test_preserves_order(self):
        """Test that iteration follows insertion order."""
        config = ConfigMap([ConfigEntry("b", "2"), ConfigEntry("a", "1")])
        assert list(config) == ["b", "a"]
        assert list(config.items()) == [("b", "2"), ("a", "1")]
        assert config.entries == (ConfigEntry("b", "2"), ConfigEntry("a", "1"))

    def test_read_only(self):
        """Test that the map cannot be modified."""
        config = ConfigMap([ConfigEntry("a", "1")])
        with pytest.raises(TypeError):
            config["a"] = "2"

    def test_entries_frozen(self):
        """Test that entries cannot be modified."""
        entry = ConfigEntry("a", "1")
        with pytest.raises(AttributeError):
            entry.value = "2"

    @pytest.mark.parametrize("entries", [
        [ConfigEntry("", "1")],
        [ConfigEntry("a", "")],
        [ConfigEntry("a", None)],
        [ConfigEntry("a", "1"), ConfigEntry("a", "2")],
    ])
    def test_rejects_invalid_entries(self, entries):
        """Test empty names, empty or missing values and duplicates."""
        with pytest.raises(ConfigurationError):
            ConfigMap(entries)


class TestRender:
    """Test export line rendering."""

    def test_format_export_line(self):
        """Test a single line without quoting."""
        assert format_export_line("npm_config_arch", "x64") == "export npm_config_arch=x64"

    def test_render_one_line_per_entry(self):
        """Test count, order and trailing newline."""
        config = build_config(platform="linux")
        text = render_exports(config)
        lines = text.splitlines()

        assert text.endswith("\n")
        assert "" not in lines
        assert len(lines) == len(config)
        assert lines == [f"export {k}={v}" for k, v in config.items()]

    def test_render_is_idempotent(self):
        """Test that rendering twice gives identical output."""
        config = build_config(platform="linux")
        assert render_exports(config) == render_exports(config)

    def test_render_empty_map(self):
        """Test that an empty map renders nothing."""
        assert render_exports(ConfigMap([])) == ""


class TestExportShell:
    """Test writing exports to a stream."""

    def test_linux_scenario(self, capsys):
        """Test the linux x64 output written to stdout."""
        config = build_config(platform="linux", arch="x64", node_version="0.11.14", atom_shell_version="0.17.1")
        export_shell(config)

        lines = capsys.readouterr().out.splitlines()
        install_dir = os.path.dirname(os.path.abspath(builder_module.__file__))
        assert lines[0] == f"export p1stream_include_dir={os.path.join(install_dir, 'include')}"
        assert "export npm_config_target=0.11.14" in lines[1:]
        assert "export node_platform=linux" in lines

    def test_twice_is_byte_identical(self):
        """Test that exporting twice writes the same bytes."""
        config = build_config(platform="darwin")
        first, second = io.StringIO(), io.StringIO()
        export_shell(config, first)
        export_shell(config, second)
        assert first.getvalue() == second.getvalue()
