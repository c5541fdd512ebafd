from __future__ import annotations

import pytest

from scoutcode.configuration import ScoutcodeSettings, reset_settings_cache
from scoutcode.encoders.registry import EncoderRegistry, build_default_registry
from scoutcode.parser import parse_text
from scoutcode.renderer import RenderOptions, render_message
from scoutcode.separators import SeparatorOverrides


@pytest.fixture
def registry() -> EncoderRegistry:
    return build_default_registry()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user config files and SCOUTCODE_* variables out of the tests."""

    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for name in ScoutcodeSettings.model_fields:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield workdir
    reset_settings_cache()


@pytest.fixture
def encode(registry):
    """Parse, run encoders ``(id, config)`` in order and render with a plain letter space."""

    def run(text, *steps, letter=" ", spacing=None):
        message = parse_text(text)
        for step in steps:
            encoder_id, config = step if isinstance(step, tuple) else (step, None)
            registry.run(encoder_id, message, config)
        options = RenderOptions(
            spacing=spacing,
            separators=SeparatorOverrides(letter=letter) if letter is not None else None,
        )
        return render_message(message, options).content

    return run
