#!/usr/bin/env python3
"""
Print the p1stream build environment as shell exports.

Usage:
  eval "$(python3 print_config_env.py [config.yml])"
"""

from p1stream_env.config_loader import main


if __name__ == "__main__":
    main()
