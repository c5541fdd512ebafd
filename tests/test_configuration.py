import pytest

from scoutcode.configuration import ScoutcodeSettings, get_settings, reset_settings_cache
from scoutcode.errors import ScoutcodeConfigurationError


def _home_config(tmp_path, content):
    path = tmp_path / "home" / ".config" / "scoutcode" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults(isolated_settings):
    settings = get_settings()
    assert settings == ScoutcodeSettings()
    assert settings.SCOUTCODE_ASSETS_BASE == "./assets/codes"
    assert settings.SCOUTCODE_IMAGE_FORMAT == "svg"
    assert settings.SCOUTCODE_RENDER_FORMAT == "auto"
    assert not settings.SCOUTCODE_DEBUG


def test_local_yaml_overrides_home_yaml(tmp_path, isolated_settings):
    _home_config(tmp_path, "SCOUTCODE_IMAGE_FORMAT: .PNG\nSCOUTCODE_VERBOSE: false\n")
    (isolated_settings / "scoutcode.yaml").write_text(
        "SCOUTCODE_VERBOSE: true\nunrelated: 1\n", encoding="utf-8"
    )
    settings = get_settings()
    assert settings.SCOUTCODE_IMAGE_FORMAT == "png"
    assert settings.SCOUTCODE_VERBOSE is True


def test_env_layers_override_yaml(isolated_settings, monkeypatch):
    (isolated_settings / "scoutcode.yaml").write_text(
        "SCOUTCODE_RENDER_FORMAT: html\nSCOUTCODE_ASSETS_BASE: /yaml\n", encoding="utf-8"
    )
    (isolated_settings / ".env").write_text(
        "SCOUTCODE_RENDER_FORMAT=text\nSCOUTCODE_ASSETS_BASE=/dotenv\n", encoding="utf-8"
    )
    monkeypatch.setenv("SCOUTCODE_ASSETS_BASE", "/process")
    settings = get_settings()
    assert settings.SCOUTCODE_RENDER_FORMAT == "text"
    assert settings.SCOUTCODE_ASSETS_BASE == "/process"


def test_explicit_app_dir(tmp_path):
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / ".env").write_text("SCOUTCODE_DEBUG=1\n", encoding="utf-8")
    assert get_settings(app_dir).SCOUTCODE_DEBUG is True
    assert get_settings().SCOUTCODE_DEBUG is False


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("SCOUTCODE_VERBOSE", "true")
    assert get_settings() is first
    reset_settings_cache()
    assert get_settings().SCOUTCODE_VERBOSE is True


def test_validation_errors_name_their_source(monkeypatch):
    monkeypatch.setenv("SCOUTCODE_RENDER_FORMAT", "pdf")
    with pytest.raises(ScoutcodeConfigurationError) as excinfo:
        get_settings()
    message = str(excinfo.value)
    assert message.startswith("Configuration validation errors detected:")
    assert "- SCOUTCODE_RENDER_FORMAT:" in message
    assert "(source: env:process:SCOUTCODE_RENDER_FORMAT)" in message


def test_yaml_root_must_be_a_mapping(isolated_settings):
    (isolated_settings / "scoutcode.yaml").write_text("- svg\n- png\n", encoding="utf-8")
    with pytest.raises(ScoutcodeConfigurationError) as excinfo:
        get_settings()
    assert "expected a mapping" in str(excinfo.value)


def test_broken_yaml(tmp_path):
    _home_config(tmp_path, "SCOUTCODE_DEBUG: [unclosed\n")
    with pytest.raises(ScoutcodeConfigurationError) as excinfo:
        get_settings()
    assert "could not be read" in str(excinfo.value)


def test_empty_yaml_is_ignored(isolated_settings):
    (isolated_settings / "scoutcode.yaml").write_text("", encoding="utf-8")
    assert get_settings() == ScoutcodeSettings()
