"""Layered settings loader for scoutcode.

Sources, later ones winning: ``~/.config/scoutcode/config.yaml``,
``<app_dir>/scoutcode.yaml``, ``<app_dir>/.env`` and the process environment.
None of them is required.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Sequence, Tuple

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ScoutcodeConfigurationError

APP_NAME = "scoutcode"
LOCAL_CONFIG_NAME = "scoutcode.yaml"


class ScoutcodeSettings(BaseModel):
    """Schema describing all supported configuration options."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    SCOUTCODE_DEBUG: bool = Field(
        default=False,
        description="Print engine debug blocks (tree dumps, metadata) to stderr.",
    )
    SCOUTCODE_VERBOSE: bool = Field(
        default=False,
        description="Print one progress line per encoder step.",
    )
    SCOUTCODE_ASSETS_BASE: str = Field(
        default="./assets/codes",
        description="Base path or URL of the code images.",
    )
    SCOUTCODE_IMAGE_FORMAT: Literal["svg", "png"] = Field(default="svg")
    SCOUTCODE_RENDER_FORMAT: Literal["auto", "html", "text"] = Field(default="auto")

    @model_validator(mode="before")
    @classmethod
    def _normalise_formats(cls, data: Any) -> Any:
        if isinstance(data, dict):
            image_format = data.get("SCOUTCODE_IMAGE_FORMAT")
            if isinstance(image_format, str):
                data["SCOUTCODE_IMAGE_FORMAT"] = image_format.strip().lower().lstrip(".")
            render_format = data.get("SCOUTCODE_RENDER_FORMAT")
            if isinstance(render_format, str):
                data["SCOUTCODE_RENDER_FORMAT"] = render_format.strip().lower()
        return data


def _yaml_paths(app_dir: Path) -> List[Tuple[Path, str]]:
    return [
        (Path.home() / ".config" / APP_NAME / "config.yaml", "home"),
        (app_dir / LOCAL_CONFIG_NAME, "local"),
    ]


def _load_yaml_layers(
    app_dir: Path, sources: Dict[str, str]
) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for path, label in _yaml_paths(app_dir):
        if not path.is_file():
            continue
        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ScoutcodeConfigurationError(
                f"Configuration file {path} could not be read: {exc}"
            ) from exc
        if parsed is None:
            continue
        if not isinstance(parsed, Mapping):
            raise ScoutcodeConfigurationError(
                f"Invalid configuration file {path}: expected a mapping at the root."
            )
        for key, value in parsed.items():
            result[str(key)] = value
            sources[str(key)] = f"yaml:{label}:{path}"
    return result


def _merge_env_sources(
    target: Dict[str, Any],
    sources: Dict[str, str],
    *,
    app_dir: Path,
) -> None:
    """Merge .env and process environment variables into the target mapping."""

    allowed = set(ScoutcodeSettings.model_fields)

    def merge_values(values: Mapping[str, Any], *, source_prefix: str) -> None:
        for key, value in sorted(values.items()):
            if value is None or key not in allowed:
                continue
            target[key] = value
            sources[key] = f"env:{source_prefix}:{key}"

    dotenv_path = app_dir / ".env"
    if dotenv_path.exists():
        merge_values(dotenv_values(dotenv_path), source_prefix=".env")

    merge_values(dict(os.environ), source_prefix="process")


def _format_validation_errors(
    entries: Sequence[Mapping[str, Any]], sources: Mapping[str, str]
) -> str:
    details: List[str] = []
    for entry in entries:
        location = ".".join(str(part) for part in entry.get("loc") or () if part != "")
        message = str(entry.get("msg") or "Invalid value")
        field_name = str((entry.get("loc") or ("",))[0])
        source = sources.get(field_name)
        origin = f" (source: {source})" if source else ""
        prefix = f"{location}: " if location else ""
        details.append(f"- {prefix}{message}{origin}")
    return "Configuration validation errors detected:\n" + "\n".join(details)


@lru_cache(maxsize=None)
def _load_settings(app_dir: Path) -> ScoutcodeSettings:
    """Load configuration layers once and cache the immutable model."""

    sources: Dict[str, str] = {}
    combined = _load_yaml_layers(app_dir, sources)
    _merge_env_sources(combined, sources, app_dir=app_dir)
    try:
        return ScoutcodeSettings.model_validate(combined)
    except ValidationError as exc:
        raise ScoutcodeConfigurationError(
            _format_validation_errors(exc.errors(), sources)
        ) from exc


def get_settings(app_dir: Path | None = None) -> ScoutcodeSettings:
    """Return the validated settings for ``app_dir`` (default: the cwd)."""

    return _load_settings((app_dir or Path.cwd()).resolve())


def reset_settings_cache() -> None:
    _load_settings.cache_clear()
