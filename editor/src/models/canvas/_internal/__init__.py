"""
Canvas Internal Package - DO NOT IMPORT FROM HERE

This package contains INTERNAL implementation for the Canvas model:
- instance.py: ComponentInstance, ComponentState, ComponentType
- group.py: ComponentGroup
- properties.py: ComponentProperties (typed fields + residual bag)

FORBIDDEN: Do not import from models.canvas._internal.* directly
CORRECT: Import from models.canvas (the public API)

Example:
    from models.canvas import Canvas, ComponentInstance, ComponentGroup
"""

# This package is internal - do not populate __all__
# External code must use models.canvas
