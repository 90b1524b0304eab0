"""
Tests for marquee selection.

Covers both the stateless query service and the Canvas.select_in_rect
entry point (selection replacement / extension).
"""
import pytest
from conftest import make_spec
from services.spatial_query import is_click, marquee_candidates, query_rect
from models.canvas import SelectionMode


# ══════════════════════════════════════════════════════════════════════════
# Service
# ══════════════════════════════════════════════════════════════════════════

class TestQueryRect:

    def test_click_threshold(self):
        assert is_click(10, 10, 12, 12)
        assert is_click(10, 10, 14.9, 14.9)
        assert not is_click(10, 10, 15, 12)
        assert not is_click(10, 10, 12, 15)

    def test_click_sized_rect_hits_nothing(self, canvas):
        canvas.create_instance(make_spec(0, 0, 100, 100))
        assert query_rect(canvas.get_instances(), 10, 10, 12, 12) == []

    def test_overlap_any_drag_direction(self, scenario):
        canvas, a, b = scenario
        instances = canvas.get_instances()
        assert query_rect(instances, 120, 60, 140, 70) == [b]
        assert query_rect(instances, 140, 70, 120, 60) == [b]

    def test_edge_contact_is_not_a_hit(self, canvas):
        i = canvas.create_instance(make_spec(0, 0, 100, 50))
        instances = canvas.get_instances()
        assert query_rect(instances, 100, 0, 200, 50) == []
        assert query_rect(instances, 0, 50, 100, 100) == []
        assert query_rect(instances, 99, 49, 200, 200) == [i]

    def test_canvas_order(self, scenario):
        canvas, a, b = scenario
        assert query_rect(canvas.get_instances(), -10, -10, 500, 500) == [a, b]

    def test_hidden_and_grouped_excluded(self, canvas):
        hidden = make_spec(0, 0, 50, 50)
        hidden['visible'] = False
        canvas.create_instance(hidden)
        grouped = canvas.create_instance(make_spec(0, 0, 50, 50))
        canvas.create_group([grouped])
        free = canvas.create_instance(make_spec(0, 0, 50, 50))

        instances = canvas.get_instances()
        assert [inst.id for inst in marquee_candidates(instances)] == [free]
        assert query_rect(instances, -10, -10, 100, 100) == [free]

    def test_empty_canvas(self):
        assert query_rect([], 0, 0, 100, 100) == []


# ══════════════════════════════════════════════════════════════════════════
# Canvas.select_in_rect
# ══════════════════════════════════════════════════════════════════════════

class TestSelectInRect:

    def test_replaces_selection(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        hits = canvas.select_in_rect(120, 60, 140, 70)
        assert hits == [b]
        assert canvas.selected_component_ids == [b]
        assert canvas.selected_component_id == b

    def test_click_leaves_selection(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        assert canvas.select_in_rect(10, 10, 12, 12) == []
        assert canvas.selected_component_ids == [a]

    def test_no_hits_clears(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        assert canvas.select_in_rect(500, 500, 600, 600) == []
        assert canvas.get_selection().is_empty

    def test_extend_unions(self, canvas):
        a = canvas.create_instance(make_spec(0, 0, 10, 10))
        b = canvas.create_instance(make_spec(100, 0, 10, 10))
        c = canvas.create_instance(make_spec(200, 0, 10, 10))
        canvas.select_instance(a)
        canvas.select_in_rect(90, -5, 220, 20, extend=True)
        assert canvas.selected_component_ids == [a, b, c]

    def test_extend_from_group_mode_drops_group(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.select_in_rect(290, -5, 320, 20, extend=True)
        selection = canvas.get_selection()
        assert selection.mode is SelectionMode.COMPONENTS
        assert selection.component_ids == (c,)

    def test_grouped_members_not_picked(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        assert canvas.select_in_rect(-10, -10, 500, 500) == []
        assert canvas.get_selection().is_empty

    def test_notifies_once(self, scenario):
        canvas, a, b = scenario
        events = []
        canvas.subscribe(events.append)
        canvas.select_in_rect(-10, -10, 500, 500)
        canvas.select_in_rect(0, 0, 1, 1)
        assert events == ['select']
