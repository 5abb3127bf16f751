"""Utility functions."""

from . import str
