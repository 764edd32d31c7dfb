"""Diagnostics package.

- error_profile: error of every approximation against the math module;
  plotting requires the diagnostics extras (numpy + matplotlib)
"""

__all__ = ["error_profile"]
