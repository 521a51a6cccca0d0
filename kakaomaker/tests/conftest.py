"""Unit tests configuration file."""

import pytest


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def write_layouts(tmp_path):
    """Write layout files into a `res/layout` directory and return the `res` path."""

    def write(**layouts):
        layout_dir = tmp_path / "res" / "layout"
        layout_dir.mkdir(parents=True, exist_ok=True)
        for name, text in layouts.items():
            (layout_dir / f"{name}.xml").write_text(text, encoding="utf-8")
        return tmp_path / "res"

    return write
