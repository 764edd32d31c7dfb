"""Bit-level approximations and small numeric helpers."""
