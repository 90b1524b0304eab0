"""
Canvas Design Editor - Data Models

This package contains the data model classes for the design canvas.
This is the MODEL in MVC architecture.

Public API: Import Canvas and the entity types from models.canvas
Geometry primitives live in models.geometry (no model dependencies).
The models/canvas/_internal/ subdirectory contains internal implementation only.
"""
