"""Environment variable expansion for configuration values.

Supported forms:
    $VAR            value of VAR, left untouched when VAR is unset
    ${VAR}          same as above
    ${VAR:default}  value of VAR, or ``default`` when VAR is unset or empty

Variables are read from ``os.environ`` unless another mapping is passed.
"""
import os
import re
from typing import Any, Dict, Mapping, Optional

_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]", environ: Mapping[str, str]) -> str:
    name = match.group("braced") or match.group("bare")
    default = match.group("default")
    value = environ.get(name)

    if default is not None:
        return value if value else default
    if value is None:
        return match.group(0)
    return value


def expand_env_vars(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """Recursively expand environment variables in strings, dicts and lists.

    Non-string leaves are returned unchanged.
    """
    if environ is None:
        environ = os.environ
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda match: _replace(match, environ), value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item, environ) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item, environ) for item in value]
    return value


def expand_config_env_vars(
    config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration mapping."""
    if not isinstance(config, dict):
        return config
    return expand_env_vars(config, environ)
