"""Scaffold renamed forks of VSCode extension templates."""

__version__ = "0.1.0"
