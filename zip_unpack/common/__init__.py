"""Shared errors, constants, settings and logging helpers."""
