"""Shared helpers: content encoding, unit files, templates, logging."""
