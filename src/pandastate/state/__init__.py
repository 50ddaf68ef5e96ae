"""State layer.

This package is the single source of truth for how decoded log entries
are ordered, filtered and folded into a deterministic per-object
instance snapshot.
"""
