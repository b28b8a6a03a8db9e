"""colour_kit.core — Foundation layer.

Contains the colour engine (hex normalization, conversions, shade ramps,
derived facts), type definitions, settings, swatch rendering and the report
builder. This module has NO dependencies on colour_kit.commands or
colour_kit.registry. Only stdlib, numpy, and PIL are allowed here.
"""
