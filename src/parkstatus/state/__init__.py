"""State layer.

Holds the row list of the current refresh cycle and rejects results that
belong to a superseded cycle.
"""
