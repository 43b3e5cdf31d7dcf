"""webcolor.core — Foundation layer.

Contains the keyword table, parser, colour value, contrast engine, type
definitions, settings and report builder. This package has NO dependencies on
webcolor.commands or webcolor.registry.
"""
