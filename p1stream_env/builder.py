#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Construction of the build environment export map.

Values are derived from a handful of literals (versions, base URLs, the
target architecture) and the host platform reported by the interpreter.
"""

import os
import sys
from typing import Optional

from .types import BuildSettings, ConfigEntry, ConfigMap, ConfigurationError

NODE_VERSION_DEFAULT = "0.11.14"
ATOM_SHELL_VERSION_DEFAULT = "0.17.1"
ARCH_DEFAULT = "x64"

ATOM_SHELL_PACKAGE_TEMPLATE = "atom-shell-v{version}-{platform}-{arch}.zip"
ATOM_SHELL_PACKAGE_URL_TEMPLATE = (
    "https://github.com/atom/atom-shell/releases/download/v{version}/"
    + ATOM_SHELL_PACKAGE_TEMPLATE
)
ATOM_DIST_URL_DEFAULT = "https://gh-contractor-zcbenz.s3.amazonaws.com/atom-shell/dist"

INCLUDE_SUBDIR = "include"

# (exported name, BuildSettings field or derived field), in output order.
# node_version is sourced from the node version literal; older releases
# pointed it at a `version` field that never existed and exported an
# undefined value.
EXPORT_FIELDS = (
    ("p1stream_include_dir", "include_dir"),
    ("node_platform", "platform"),
    ("node_arch", "arch"),
    ("node_version", "node_version"),
    ("atom_shell_version", "atom_shell_version"),
    ("atom_shell_package", "atom_shell_package"),
    ("atom_shell_package_url", "atom_shell_package_url"),
    ("atom_dist_url", "atom_dist_url"),
    # Read by npm / node-gyp
    ("npm_config_dist_url", "atom_dist_url"),
    ("npm_config_target", "node_version"),
    ("npm_config_arch", "arch"),
)


def package_filename(version: str, platform: str, arch: str) -> str:
    """Name of the atom-shell release archive for a version and target."""
    return ATOM_SHELL_PACKAGE_TEMPLATE.format(version=version, platform=platform, arch=arch)


def package_url(
    version: str,
    platform: str,
    arch: str,
    template: str = ATOM_SHELL_PACKAGE_URL_TEMPLATE
) -> str:
    """
    Download URL of the atom-shell release archive.

    Args:
        version: atom-shell version, without the leading 'v'
        platform: Target platform (e.g. 'darwin', 'linux', 'win32')
        arch: Target architecture (e.g. 'x64')
        template: URL pattern with {version}, {platform} and {arch} fields

    Returns:
        The template with all three values substituted verbatim
    """
    try:
        return template.format(version=version, platform=platform, arch=arch)
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid package URL template {template!r}: {e}") from e


def default_include_dir() -> str:
    """Absolute path of the header directory shipped with this package."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), INCLUDE_SUBDIR)


class ConfigBuilder:
    """Builds the ordered export map from BuildSettings."""

    def __init__(self, settings: BuildSettings):
        self.settings = settings

    def _validate(self) -> None:
        for field in ("include_dir", "platform", "arch", "node_version", "atom_shell_version", "atom_dist_url"):
            value = getattr(self.settings, field)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"Setting '{field}' must be a non-empty string")

    def _fields(self) -> dict:
        s = self.settings
        fields = {
            "include_dir": s.include_dir,
            "platform": s.platform,
            "arch": s.arch,
            "node_version": s.node_version,
            "atom_shell_version": s.atom_shell_version,
            "atom_dist_url": s.atom_dist_url,
        }
        fields["atom_shell_package"] = package_filename(s.atom_shell_version, s.platform, s.arch)
        fields["atom_shell_package_url"] = package_url(
            s.atom_shell_version, s.platform, s.arch, template=s.atom_shell_package_url_template
        )
        return fields

    def build(self, export_fields=EXPORT_FIELDS) -> ConfigMap:
        """
        Build the export map.

        Args:
            export_fields: Sequence of (exported name, source field) pairs

        Returns:
            ConfigMap with one entry per pair, in the given order

        Raises:
            ConfigurationError: If a setting is empty or a pair refers to
                a source field that is not defined
        """
        self._validate()
        fields = self._fields()

        entries = []
        for name, source in export_fields:
            if source not in fields:
                raise ConfigurationError(f"Variable '{name}' refers to undefined field '{source}'")
            entries.append(ConfigEntry(name, fields[source]))
        return ConfigMap(entries)


def build_config(
    platform: Optional[str] = None,
    arch: Optional[str] = None,
    node_version: Optional[str] = None,
    atom_shell_version: Optional[str] = None,
    atom_shell_package_url_template: Optional[str] = None,
    atom_dist_url: Optional[str] = None,
    include_dir: Optional[str] = None
) -> ConfigMap:
    """
    Build the export map, falling back to the literal defaults.

    The host platform is read from sys.platform when not given.
    """
    settings = BuildSettings(
        include_dir=include_dir if include_dir is not None else default_include_dir(),
        platform=platform if platform is not None else sys.platform,
        arch=arch if arch is not None else ARCH_DEFAULT,
        node_version=node_version if node_version is not None else NODE_VERSION_DEFAULT,
        atom_shell_version=atom_shell_version if atom_shell_version is not None else ATOM_SHELL_VERSION_DEFAULT,
        atom_shell_package_url_template=(
            atom_shell_package_url_template
            if atom_shell_package_url_template is not None
            else ATOM_SHELL_PACKAGE_URL_TEMPLATE
        ),
        atom_dist_url=atom_dist_url if atom_dist_url is not None else ATOM_DIST_URL_DEFAULT,
    )
    return ConfigBuilder(settings).build()
