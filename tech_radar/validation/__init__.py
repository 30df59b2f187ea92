"""Validation package.

This package contains the structural checks for the radar document and the
non-interactive runner built on top of them.

Design goals
------------
1) Every check is a plain function that raises on failure (usable from pytest directly).
2) The runner isolates checks: one failure never hides another.
3) Failures carry the entry index and id they refer to.
"""
