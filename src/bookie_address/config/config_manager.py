"""Config manager — bookie_config.json + ``BOOKIE_*`` environment → BookieConfig."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from bookie_address.core.errors import InvalidConfiguration
from bookie_address.core.models.config import BookieConfig

_log = logging.getLogger(__name__)

# Packaged defaults, shipped next to this module.
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "bookie_config.json"

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------
# Env-var name → ``(section, field)``.  Values reach the models as strings and
# pydantic parses them, so ``BOOKIE_ALLOW_LOOPBACK=flase`` is an error rather
# than a silent ``False``.
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "BOOKIE_ADVERTISED_ADDRESS": ("address", "advertised_address"),
    "BOOKIE_ALLOW_LOOPBACK": ("address", "allow_loopback"),
    "BOOKIE_USE_HOSTNAME_AS_IDENTITY": ("address", "use_hostname_as_identity"),
    "BOOKIE_USE_SHORT_HOSTNAME": ("address", "use_short_hostname"),
    "BOOKIE_SERVICE_SELECTOR": ("address", "service_selector"),
    "BOOKIE_PORT": ("address", "port"),
    "BOOKIE_LOG_LEVEL": ("system", "log_level"),
}


def _env_overrides(environ: Mapping[str, str]) -> dict[tuple[str, str], tuple[str, str]]:
    """``(section, field) → (env var, raw value)`` for every override that is set."""
    return {
        target: (env_key, environ[env_key])
        for env_key, target in _ENV_OVERRIDES.items()
        if env_key in environ
    }


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
def load_config(config_path: Path | str | None = None) -> BookieConfig:
    """Read the config file, layer ``BOOKIE_*`` variables on top, validate.

    Args:
        config_path: Path to ``bookie_config.json``.  When *None*, falls back
            to ``BOOKIE_CONFIG_FILE`` and then the packaged default.

    Raises:
        FileNotFoundError: If the config file does not exist.
        InvalidConfiguration: The file is not a JSON object, or an
            environment variable holds a value the models reject (the
            variable is named in ``source``).
        pydantic.ValidationError: The file's own contents are invalid.
    """
    path = _resolve_config_path(config_path)
    _log.info("Loading config from %s", path)
    raw = _read_json(path)

    overrides = _env_overrides(os.environ)
    for (section, field), (env_key, value) in overrides.items():
        raw.setdefault(section, {})[field] = value
        _log.debug("Env override: %s → %s.%s", env_key, section, field)

    try:
        return BookieConfig.model_validate(raw)
    except ValidationError as exc:
        for error in exc.errors():
            origin = overrides.get(tuple(error["loc"][:2]))
            if origin is not None:
                env_key, value = origin
                raise InvalidConfiguration(env_key, f"{value!r} rejected: {error['msg']}") from exc
        raise


def _read_json(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(str(path), f"invalid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidConfiguration(str(path), "top level must be a JSON object")
    return raw


def _resolve_config_path(config_path: Path | str | None) -> Path:
    if config_path is None:
        config_path = os.environ.get("BOOKIE_CONFIG_FILE") or _DEFAULT_CONFIG_PATH
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(
            f"Bookie config not found: {path} "
            "(pass a path or set BOOKIE_CONFIG_FILE)"
        )
    return path
