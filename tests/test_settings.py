"""Tests for confscout settings and diagnostics."""

from io import StringIO

import pytest
from rich.console import Console

from confscout.core.diagnostics import Diagnostics
from confscout.core.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CONFSCOUT_NODE", raising=False)
    monkeypatch.delenv("CONFSCOUT_VERBOSE", raising=False)


class TestSettings:

    def test_defaults_when_missing(self, tmp_path):
        settings = Settings.load(tmp_path / "missing.toml")

        assert settings.node_binary == "node"
        assert settings.verbose is False
        assert settings.providers == {}

    def test_load_toml(self, write_file):
        path = write_file(
            "config.toml",
            '[confscout]\nnode_binary = "/opt/node/bin/node"\nverbose = true\n\n'
            '[confscout.providers]\nts = "my_plugin.TsProvider"\n',
        )

        settings = Settings.load(path)

        assert settings.node_binary == "/opt/node/bin/node"
        assert settings.verbose is True
        assert settings.providers == {"ts": "my_plugin.TsProvider"}

    def test_non_table_section_uses_defaults(self, write_file):
        path = write_file("config.toml", "confscout = 1\n")
        assert Settings.load(path) == Settings()

    def test_corrupt_file_uses_defaults(self, write_file):
        path = write_file("config.toml", "this is = = not toml")
        assert Settings.load(path) == Settings()

    def test_local_settings_lookup(self, tmp_path, write_file, monkeypatch):
        write_file(".confscout/config.toml", 'node_binary = "nodejs"\n')
        monkeypatch.chdir(tmp_path)

        assert Settings.load().node_binary == "nodejs"

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CONFSCOUT_NODE", "/usr/local/bin/node")
        monkeypatch.setenv("CONFSCOUT_VERBOSE", "yes")

        settings = Settings.load(tmp_path / "missing.toml")

        assert settings.node_binary == "/usr/local/bin/node"
        assert settings.verbose is True


class TestDiagnostics:

    def test_listeners_receive_events(self):
        events = []
        diagnostics = Diagnostics()
        diagnostics.subscribe(lambda level, message: events.append((level, message)))

        diagnostics.error("e")
        diagnostics.warn("w")
        diagnostics.log_verbose("v")

        assert events == [("error", "e"), ("warn", "w"), ("verbose", "v")]

    def test_no_listener_is_fine(self):
        Diagnostics().warn("nobody hears this")

    def test_broken_listener_does_not_raise(self):
        def broken(level, message):
            raise RuntimeError("boom")

        events = []
        diagnostics = Diagnostics()
        diagnostics.subscribe(broken)
        diagnostics.subscribe(lambda level, message: events.append(level))

        diagnostics.error("still delivered")

        assert events == ["error"]

    def test_unsubscribe(self):
        events = []
        listener = lambda level, message: events.append(level)  # noqa: E731
        diagnostics = Diagnostics()
        diagnostics.subscribe(listener)
        diagnostics.unsubscribe(listener)

        diagnostics.warn("x")

        assert events == []

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            Diagnostics().emit("debug", "x")

    def test_console_hides_verbose_unless_enabled(self):
        out = StringIO()
        quiet = Diagnostics(console=Console(file=out, no_color=True, width=200))
        quiet.log_verbose("hidden message")
        quiet.warn("shown [with brackets]")

        text = out.getvalue()
        assert "hidden message" not in text
        assert "shown [with brackets]" in text

        out = StringIO()
        loud = Diagnostics(console=Console(file=out, no_color=True, width=200), verbose=True)
        loud.log_verbose("now visible")
        assert "now visible" in out.getvalue()
