from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from apps.qrsnap.settings import QrSnapSettings

ENV_PREFIX = "QRSNAP_"

# --- paths --------------------------------------------------------------------


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    p = Path(__file__).resolve()
    for ancestor in [p, *p.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return Path.cwd()


def _profiles_dir(env: Mapping[str, str]) -> Path:
    # Allow override (useful for tests): QRSNAP_CONFIG_DIR points *at* profiles/
    override = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override)
    return _repo_root() / "configs" / "profiles"


def _load_profile_table(env: Mapping[str, str], profile: str) -> dict[str, Any]:
    f = _profiles_dir(env) / f"{profile}.toml"
    if not f.exists():
        return {}
    text = f.read_text("utf-8")
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Failed to parse profile TOML: {f}") from e


# --- overlay helpers ----------------------------------------------------------


def _coerce_env_value(raw: str) -> Any:
    """
    Try to parse JSON first (so lists/dicts/numbers/bools work),
    then fall back to the original string.
    """
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _deep_merge(base: dict[str, Any], over: Mapping[str, Any]) -> dict[str, Any]:
    for k, v in over.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
    return base


def _collect_env_for(
    base: Mapping[str, Any], env: Mapping[str, str], prefix: str = ENV_PREFIX
) -> dict[str, Any]:
    """
    Collect overrides like QRSNAP_LOG_LEVEL -> {'log_level': ...} and nested
    QRSNAP_OUTPUT__CLIPBOARD=true -> {'output': {'clipboard': True}}.
    Case-insensitive; unknown keys are ignored.
    """
    out: dict[str, Any] = {}
    plen = len(prefix)
    for k, v in env.items():
        if not k.upper().startswith(prefix):
            continue
        path = [part.lower() for part in k[plen:].split("__")]
        if not _path_exists(base, path):
            continue
        target = out
        for part in path[:-1]:
            target = target.setdefault(part, {})
        target[path[-1]] = _coerce_env_value(v)
    return out


def _path_exists(base: Mapping[str, Any], path: list[str]) -> bool:
    node: Any = base
    for part in path:
        if not isinstance(node, Mapping) or part not in node:
            return False
        node = node[part]
    return True


# --- public API ---------------------------------------------------------------


def load_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> QrSnapSettings:
    """
    Merge defaults (QrSnapSettings) <- TOML [qrsnap] <- env QRSNAP_*.
    Env examples: QRSNAP_LOG_LEVEL=DEBUG, QRSNAP_OUTPUT__CLIPBOARD=true,
    QRSNAP_SELECTION='{"timeout_s": 10}'
    """
    env = os.environ if env is None else env
    profile = (profile or env.get(f"{ENV_PREFIX}PROFILE") or "dev").strip()

    # start from defaults exposed by the model
    base = QrSnapSettings.model_validate({}).model_dump()

    # TOML overlay
    toml_table = _load_profile_table(env, profile)
    toml_app = toml_table.get("qrsnap", {}) if isinstance(toml_table, dict) else {}
    if isinstance(toml_app, dict):
        _deep_merge(base, toml_app)

    # env overlay
    _deep_merge(base, _collect_env_for(base, env))

    # validate
    return QrSnapSettings.model_validate(base)
