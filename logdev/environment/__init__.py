"""
Environment module

Typed access to process environment variables.
"""

from logdev.environment.environment import Environment

__all__ = ["Environment"]
