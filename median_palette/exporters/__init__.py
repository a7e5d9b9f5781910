"""Palette output formats.

Every .py file in this package that defines an `exporter` object is
auto-registered by median_palette.registry.discover().
"""
