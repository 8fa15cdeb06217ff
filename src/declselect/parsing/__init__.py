"""
declselect path parsing components.
"""

from declselect.parsing.path import Path, parse_path

__all__ = [
    "Path",
    "parse_path",
]
