#!/usr/bin/env python3
"""
Lightweight YAML configuration loader for the build environment exporter.

Every setting is optional; anything not present in config.yml falls back
to the literal defaults in p1stream_env.builder.

Can also be run as a CLI tool to print environment variable exports for shell consumption:

Usage:
  eval "$(python3 -m p1stream_env.config_loader [config.yml])"
"""

import sys
from pathlib import Path
from typing import Any, Dict

import yaml

from .builder import build_config
from .exporter import export_shell
from .types import ConfigMap, ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / 'config.yml'


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Fetch nested key via dot.path with default."""
    cur: Any = d
    for part in path.split('.'):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _optional_str(cfg: Dict[str, Any], path: str, strict: bool = False) -> str | None:
    """
    Fetch a scalar setting as a string, or None when absent.

    With strict=True only YAML strings are accepted, since str() would
    rewrite numbers (an unquoted 0.20 loads as the float 0.2).
    """
    value = _deep_get(cfg, path)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ConfigurationError(f"Config key '{path}' must be a scalar, got {type(value).__name__}")
    if strict and not isinstance(value, str):
        raise ConfigurationError(
            f"Config key '{path}' must be a string, got {value!r}; quote it in config.yml (e.g. \"0.20\")"
        )
    return str(value)


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML config. If not provided, uses the `config.yml` shipped with the package
    when it exists, otherwise an empty config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return {}
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
    return data


def as_env_dict(cfg: Dict[str, Any]) -> ConfigMap:
    """
    Build the ordered export map, applying overrides from the config.

    Recognized keys: platform, arch, versions.node, versions.atom_shell,
    urls.atom_shell_package, urls.atom_dist.
    """
    return build_config(
        platform=_optional_str(cfg, 'platform'),
        arch=_optional_str(cfg, 'arch'),
        node_version=_optional_str(cfg, 'versions.node', strict=True),
        atom_shell_version=_optional_str(cfg, 'versions.atom_shell', strict=True),
        atom_shell_package_url_template=_optional_str(cfg, 'urls.atom_shell_package'),
        atom_dist_url=_optional_str(cfg, 'urls.atom_dist'),
    )


def main() -> None:
    """CLI entry point for printing environment variable exports."""
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        cfg = load_config(config_path)
        env = as_env_dict(cfg)
    except (FileNotFoundError, yaml.YAMLError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    export_shell(env)


if __name__ == "__main__":
    main()
