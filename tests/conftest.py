"""
Shared fixtures for Canvas Design Editor tests.

Provides a fresh Canvas, a component spec builder and the two-rectangle
scenario used across the grouping and transform tests.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Spec builder ────────────────────────────────────────────────────────

def make_spec(x, y, width, height, type='rectangle', states=None, **properties):
    """Minimal valid creation payload"""
    return {
        'type': type,
        'x': x,
        'y': y,
        'width': width,
        'height': height,
        'properties': properties,
        'states': states or [{'id': 'default', 'name': 'Default', 'properties': {}, 'isDefault': True}],
        'visible': True,
        'locked': False,
    }


@pytest.fixture
def canvas():
    """Fresh empty Canvas"""
    from models.canvas import Canvas
    return Canvas()


@pytest.fixture
def scenario(canvas):
    """A(0,0,100,50) and B(50,25,100,50), not yet grouped

    Returns:
        (canvas, a_id, b_id)
    """
    a = canvas.create_instance(make_spec(0, 0, 100, 50))
    b = canvas.create_instance(make_spec(50, 25, 100, 50))
    return canvas, a, b


@pytest.fixture
def grouped_scenario(scenario):
    """The A/B scenario wrapped in a group

    Returns:
        (canvas, group_id, a_id, b_id)
    """
    canvas, a, b = scenario
    group_id = canvas.create_group([a, b])
    return canvas, group_id, a, b
