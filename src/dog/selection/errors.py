"""Exceptions for fatal selection and delivery failures."""

from __future__ import annotations


class DogError(Exception):
    """Base class for errors that stop a run."""


class InvalidRootError(DogError):
    """The root directory is missing, not a directory, or cannot be listed."""


class ConfigError(DogError):
    """A configuration value could not be interpreted."""


class OutputError(DogError):
    """The requested output sink could not take the rendered text."""
