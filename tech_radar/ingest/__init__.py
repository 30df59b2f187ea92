"""Ingest package - radar file discovery and JSON loading.

This package handles:
- Locating platform-tech-radar.json from a working directory
- Reading and parsing the JSON document

Key functions:
- find_radar_file: nearest radar file in a directory or its parents
- load_radar_json: parse the file into a RadarDocument

Design principle:
- Loading never validates structure; it only guarantees a JSON object
- The parsed data is preserved as-is for the checks
"""

from .loader import find_radar_file, load_radar_json

__all__ = [
    "find_radar_file",
    "load_radar_json",
]
