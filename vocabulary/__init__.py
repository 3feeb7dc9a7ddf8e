"""
vocabulary: create flash cards by hand from the command line.

The package is split into a thin CLI layer, an interactive prompt loop,
a card store, and a YAML configuration loader.
"""
