"""Sine lookup table and polynomial inverse trigonometry."""
