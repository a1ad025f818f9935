"""
CLI Module - describe the documented properties of a class from the shell.
"""

from .main import cli, main
from .report import PropertyReport, load_target

__all__ = ["cli", "main", "PropertyReport", "load_target"]
