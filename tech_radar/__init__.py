"""Tech Radar Validator -- structural checks for the platform tech radar dataset.

The dataset is a single JSON document (``platform-tech-radar.json``) listing the
radar quadrants and the tracked entries with their ring timelines.

This package provides tools for:
- Locating and loading the radar JSON file
- Checking the quadrant set against the allowed identifiers
- Checking every entry for required fields, unique ids/keys, a valid quadrant
  and a non-empty timeline
- Reporting each check as an individual pass/fail result (pytest or CLI)

Key principles:
- Read once: the document is never mutated or written back
- Isolation: a failed check never prevents its sibling checks from running
- Attribution: every failure names the entry index and id it refers to

Main subpackages:
- models: Data models (TechRadar, RadarDocument, RadarProfile, ValidationReport)
- ingest: File discovery and JSON loading
- validation: Error kinds, individual checks, report builder and CLI
"""

__all__ = []
