#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
p1stream build environment

Exports the platform, architecture, runtime versions and download URLs
needed to build the p1stream native module against atom-shell.
"""

from .builder import (
    ConfigBuilder,
    build_config,
    default_include_dir,
    package_filename,
    package_url,
    EXPORT_FIELDS,
)
from .exporter import export_shell, format_export_line, render_exports
from .types import BuildSettings, ConfigEntry, ConfigMap, ConfigurationError

__version__ = "0.1.0"

__all__ = [
    # Builder
    "ConfigBuilder",
    "build_config",
    "default_include_dir",
    "package_filename",
    "package_url",
    "EXPORT_FIELDS",

    # Exporter
    "export_shell",
    "format_export_line",
    "render_exports",

    # Types
    "BuildSettings",
    "ConfigEntry",
    "ConfigMap",
    "ConfigurationError",
]
