#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Type definitions and data classes for the build environment exporter.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator, Tuple


class ConfigurationError(ValueError):
    """Raised when the export map cannot be constructed from its inputs."""


@dataclass(frozen=True)
class ConfigEntry:
    """A single exported variable."""
    name: str
    value: str


@dataclass(frozen=True)
class BuildSettings:
    """Literal inputs the export map is derived from."""
    include_dir: str
    platform: str
    arch: str
    node_version: str
    atom_shell_version: str
    atom_shell_package_url_template: str
    atom_dist_url: str


class ConfigMap(Mapping):
    """
    Ordered, read-only mapping of variable name to value.

    Entries keep the order they were given in. Names must be unique and
    non-empty, values must be non-empty strings.
    """

    def __init__(self, entries):
        entries = tuple(entries)
        index = {}
        for entry in entries:
            if not entry.name:
                raise ConfigurationError("Variable name must not be empty")
            if not isinstance(entry.value, str) or not entry.value:
                raise ConfigurationError(f"Variable '{entry.name}' has no value")
            if entry.name in index:
                raise ConfigurationError(f"Duplicate variable name: {entry.name}")
            index[entry.name] = entry.value
        self._entries: Tuple[ConfigEntry, ...] = entries
        self._index = index

    @property
    def entries(self) -> Tuple[ConfigEntry, ...]:
        return self._entries

    def __getitem__(self, name: str) -> str:
        return self._index[name]

    def __iter__(self) -> Iterator[str]:
        return (entry.name for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ConfigMap({dict(self._index)!r})"
