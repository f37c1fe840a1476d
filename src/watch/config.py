# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

from watch.constants import DEFAULT_CATALOG_FILE, DEFAULT_SETTINGS_FILE, REPOSITORY_BACKENDS
from watch.utils.file_utils import read_json_file, write_json_file

TOKEN_PLACEHOLDER = "USE_ENV_FILE"

DEFAULT_CONFIG: dict[str, Any] = {
    "repository": {
        "backend": "catalog",
        "catalog_path": DEFAULT_CATALOG_FILE,
        "base_url": "",
        "api_token": TOKEN_PLACEHOLDER,
        "timeout_seconds": 10,
    },
    "view_model": {"cancel_previous": False},
    "window": {"width": 420, "height": 820},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


# .env keys that override ``repository`` settings
ENV_OVERRIDES = {
    "WATCH_API_URL": "base_url",
    "WATCH_API_TOKEN": "api_token",
}


def get_default_config() -> dict[str, Any]:
    return deepcopy(DEFAULT_CONFIG)


def _merge_settings(base: dict[str, Any], override: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Overlay ``override`` on ``base``; a section replaced by a non-object is rejected."""
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict):
            if not isinstance(value, dict):
                raise ConfigError(f"{prefix}{key} must be an object")
            merged[key] = _merge_settings(merged[key], value, f"{prefix}{key}.")
        else:
            merged[key] = value
    return merged


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _env_overrides(env_path: Path) -> dict[str, Any]:
    """Read the API URL and token from a ``.env`` file next to the settings.

    Lines may be prefixed with ``export``; unrelated keys are ignored.
    """
    if not env_path.exists():
        return {}

    repository: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        name, sep, value = line.partition("=")
        setting = ENV_OVERRIDES.get(name.strip())
        if not sep or setting is None:
            continue
        value = _unquote(value.strip()).strip()
        if value:
            repository[setting] = value
    return {"repository": repository} if repository else {}


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields needed to build the repository and the view models."""
    repository = config.get("repository", {})
    backend = repository.get("backend")
    if backend not in REPOSITORY_BACKENDS:
        raise ConfigError(f"repository.backend must be one of {', '.join(REPOSITORY_BACKENDS)}")

    timeout = repository.get("timeout_seconds")
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or not (1 <= timeout <= 300):
        raise ConfigError("repository.timeout_seconds must be a number in range 1..300")

    if backend == "http" and not str(repository.get("base_url", "")).strip():
        raise ConfigError("repository.base_url is required for the http backend")

    cancel_previous = config.get("view_model", {}).get("cancel_previous")
    if not isinstance(cancel_previous, bool):
        raise ConfigError("view_model.cancel_previous must be true or false")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Build the runtime settings: defaults, then the JSON file, then ``.env``.

    A settings file that is not valid JSON raises ``ConfigError``.
    """
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    config = get_default_config()
    if config_path.exists():
        try:
            loaded = read_json_file(config_path)
        except ValueError as exc:
            raise ConfigError(f"Invalid settings file {exc}") from exc
        config = _merge_settings(config, loaded)
    config = _merge_settings(config, _env_overrides(config_path.parent / ".env"))
    validate_config(config)
    return config


def _strip_api_token(config: dict[str, Any]) -> dict[str, Any]:
    config_copy = deepcopy(config)
    repository = config_copy.get("repository", {})
    if repository.get("api_token"):
        repository["api_token"] = TOKEN_PLACEHOLDER
    return config_copy


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON.

    The API token belongs in the .env file and is never written here.
    """
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, _strip_api_token(config))
    return config_path


def build_repository(config: dict[str, Any], base_dir: str | Path | None = None):
    """Create the repository selected by ``repository.backend``."""
    from watch.data.http_repository import HttpVideoRepository
    from watch.data.json_catalog import JsonCatalogRepository

    repository = config.get("repository", {})
    if repository.get("backend") == "http":
        token = str(repository.get("api_token", ""))
        if token == TOKEN_PLACEHOLDER:
            token = ""
        return HttpVideoRepository(
            base_url=str(repository.get("base_url", "")),
            token=token,
            timeout=float(repository.get("timeout_seconds", 10)),
        )

    catalog_path = Path(str(repository.get("catalog_path", DEFAULT_CATALOG_FILE)))
    if base_dir is not None and not catalog_path.is_absolute():
        catalog_path = Path(base_dir) / catalog_path
    return JsonCatalogRepository(catalog_path)
