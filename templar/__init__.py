"""Templar - scaffold projects from remote templates and keep them in sync."""

__version__ = "0.1.0"
