"""Shared pytest fixtures and helpers for product mapping tests."""

from .core import *  # noqa: F401,F403
