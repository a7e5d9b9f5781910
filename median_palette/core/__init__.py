"""median_palette.core — Foundation layer.

Contains the colour types, the median cut bucket, pixel decoding, config
loading and the report builder.
This module has NO dependencies on median_palette.exporters or median_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
