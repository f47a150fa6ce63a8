"""Geometry input layer for geoarea.

This module turns caller-held geometry data into domain models. It does
not read files or decode text: callers hand over already-structured
mappings (decoded JSON, ``__geo_interface__`` objects, hand-built dicts).

Key responsibilities:
- Accept both symbolic and string key conventions
- Validate type tags and payload presence
- Build the canonical domain representation

Key functions:
- to_geometry: Normalize any accepted input
- mapping_to_geometry: Convert one geometry mapping
- parse_geometry_type: Validate a type tag
"""

from geoarea.io.converter import mapping_to_geometry, parse_geometry_type, to_geometry

__all__ = [
    "mapping_to_geometry",
    "parse_geometry_type",
    "to_geometry",
]
