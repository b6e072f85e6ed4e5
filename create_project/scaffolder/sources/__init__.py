"""Inline file bodies, one module per framework."""
