"""Store configuration loading with precedence resolution.

This module builds a :class:`~ecwid_api.models.StoreConfig` from the
places an application usually keeps one:

* **JSON file** -- an explicit path, or ``./ecwid.json`` when present.
* **Environment** -- ``ECWID_STORE_ID``, ``ECWID_BASE_URL``,
  ``ECWID_ORDER_SECRET_KEY``, ``ECWID_PRODUCT_SECRET_KEY``, ``ECWID_TIMEOUT``.
* **Explicit overrides** -- keyword arguments to :func:`load_store_config`.

Secret keys may be given as credential sources (``env:VAR`` or
``file:/path``) instead of literal values; see :func:`resolve_credential`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ecwid_api.exceptions import ConfigurationError
from ecwid_api.models import StoreConfig

_PROJECT_CONFIG_FILENAME = "ecwid.json"

_ENV_VARS = {
    "store_id": "ECWID_STORE_ID",
    "base_url": "ECWID_BASE_URL",
    "order_secret_key": "ECWID_ORDER_SECRET_KEY",
    "product_secret_key": "ECWID_PRODUCT_SECRET_KEY",
}
_ENV_TIMEOUT = "ECWID_TIMEOUT"

_SECRET_FIELDS = ("order_secret_key", "product_secret_key")
_CREDENTIAL_PREFIXES = ("env:", "file:")


# --- File config ---


def load_config_file(path: Optional[Union[str, Path]] = None) -> Optional[dict[str, Any]]:
    """Read a JSON store configuration file.

    Args:
        path: File to read.  When ``None``, ``./ecwid.json`` is used if it
            exists.

    Returns:
        The parsed JSON object, or ``None`` when *path* is ``None`` and no
        project file exists.

    Raises:
        ConfigurationError: If an explicit *path* does not exist, or the file
            is not a JSON object.
    """
    if path is None:
        file_path = Path.cwd() / _PROJECT_CONFIG_FILENAME
        if not file_path.is_file():
            return None
    else:
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            raise ConfigurationError(f"Config file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigurationError(f"Invalid config file at {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config file at {file_path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def load_store_config(
    path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> StoreConfig:
    """Resolve a store configuration with full precedence chain.

    Precedence (high to low):
        1. Keyword *overrides* (``None`` values are ignored)
        2. Environment variables (``ECWID_*``)
        3. JSON file (*path*, or ``./ecwid.json``)
        4. Defaults

    Args:
        path: Optional JSON config file.
        **overrides: Any :class:`~ecwid_api.models.StoreConfig` field.

    Returns:
        The validated configuration, with credential-source secret keys
        resolved to their values.

    Raises:
        ConfigurationError: If no store id is found, a credential source
            cannot be resolved, or the merged values fail validation.
    """
    # 4 + 3. Defaults are filled by the model; layer in the file.
    merged: dict[str, Any] = dict(load_config_file(path) or {})

    # 2. Environment
    for field_name, var_name in _ENV_VARS.items():
        value = os.environ.get(var_name)
        if value:
            merged[field_name] = value
    env_timeout = os.environ.get(_ENV_TIMEOUT)
    if env_timeout:
        request = merged.get("request") or {}
        if not isinstance(request, dict):
            raise ConfigurationError(
                f"Invalid store configuration: request must be an object, "
                f"got {type(request).__name__}"
            )
        merged["request"] = {**request, "timeout": env_timeout}

    # 1. Explicit overrides
    merged.update({k: v for k, v in overrides.items() if v is not None})

    if not merged.get("store_id"):
        raise ConfigurationError(
            f"store_id is required (set {_ENV_VARS['store_id']} or pass store_id)"
        )

    for field_name in _SECRET_FIELDS:
        value = merged.get(field_name)
        if isinstance(value, str) and value.startswith(_CREDENTIAL_PREFIXES):
            merged[field_name] = resolve_credential(value)

    try:
        return StoreConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid store configuration: {exc}") from exc


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace

    Args:
        source: The source descriptor string.

    Returns:
        The resolved credential string.

    Raises:
        ConfigurationError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigurationError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigurationError(f"Cannot read credential file {path}: {exc}") from exc

    raise ConfigurationError(f"Unknown credential source format: {source}")
