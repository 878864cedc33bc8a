#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rendering of the export map as shell statements.
"""

import sys
from typing import Mapping, Optional, TextIO


def format_export_line(name: str, value: str) -> str:
    """Format one `export name=value` statement. The value is not quoted or escaped."""
    return f"export {name}={value}"


def render_exports(config: Mapping[str, str]) -> str:
    """Render every entry as an export line, in the map's order."""
    return "".join(format_export_line(name, value) + "\n" for name, value in config.items())


def export_shell(config: Mapping[str, str], stream: Optional[TextIO] = None) -> None:
    """
    Write export lines for the map to stdout, for use as:

        eval "$(python3 print_config_env.py)"

    Args:
        config: Ordered mapping of variable name to value
        stream: Output stream (defaults to sys.stdout)
    """
    if stream is None:
        stream = sys.stdout
    stream.write(render_exports(config))
    stream.flush()
