"""
Tests for the Canvas selection subsystem.

Selection is always exactly one of: none, components, group.
"""
import pytest
from conftest import make_spec
from models.canvas import MutationStatus, Selection, SelectionMode


def assert_exclusive(canvas):
    selection = canvas.get_selection()
    assert not (selection.component_ids and selection.group_id)
    if len(selection.component_ids) == 1:
        assert canvas.selected_component_id == selection.component_ids[0]
    else:
        assert canvas.selected_component_id is None


# ══════════════════════════════════════════════════════════════════════════
# Single and multi selection
# ══════════════════════════════════════════════════════════════════════════

class TestSelectInstance:

    def test_starts_empty(self, canvas):
        selection = canvas.get_selection()
        assert selection == Selection()
        assert selection.mode is SelectionMode.NONE

    def test_select_free_instance(self, scenario):
        canvas, a, b = scenario
        assert canvas.select_instance(a) is MutationStatus.OK
        assert canvas.selected_component_ids == [a]
        assert canvas.selected_component_id == a
        assert canvas.get_selection().mode is SelectionMode.COMPONENTS
        assert_exclusive(canvas)

    def test_select_grouped_instance_selects_group(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        canvas.clear_selection()
        canvas.select_instance(b)
        assert canvas.selected_group_id == group_id
        assert canvas.selected_component_ids == []
        assert_exclusive(canvas)

    def test_select_unknown_leaves_selection(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        assert canvas.select_instance('component_nope') is MutationStatus.NOT_FOUND
        assert canvas.selected_component_id == a

    def test_select_none_clears(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        canvas.select_instance(None)
        assert canvas.get_selection().is_empty

    def test_select_instance_leaves_group_mode(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.select_instance(c)
        assert canvas.selected_group_id is None
        assert canvas.selected_component_id == c

    def test_select_multiple(self, scenario):
        canvas, a, b = scenario
        canvas.select_multiple([a, b])
        assert canvas.selected_component_ids == [a, b]
        assert canvas.selected_component_id is None
        assert_exclusive(canvas)

    def test_select_multiple_drops_grouped_and_unknown(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.select_multiple([a, 'component_nope', c, c])
        assert canvas.selected_component_ids == [c]
        assert canvas.selected_component_id == c
        assert canvas.selected_group_id is None

    def test_select_multiple_empty_result_is_none(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        canvas.select_multiple([a, b])
        assert canvas.get_selection().is_empty


# ══════════════════════════════════════════════════════════════════════════
# Add / remove
# ══════════════════════════════════════════════════════════════════════════

class TestAddRemove:

    def test_add_is_idempotent(self, scenario):
        canvas, a, b = scenario
        canvas.add_to_selection(a)
        canvas.add_to_selection(a)
        assert canvas.selected_component_ids == [a]
        canvas.add_to_selection(b)
        assert canvas.selected_component_ids == [a, b]
        assert canvas.selected_component_id is None

    def test_add_from_group_mode(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.add_to_selection(c)
        assert canvas.selected_group_id is None
        assert canvas.selected_component_ids == [c]

    def test_add_grouped_is_dropped(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.select_instance(c)
        assert canvas.add_to_selection(a) is MutationStatus.OK
        assert canvas.selected_component_ids == [c]

    def test_add_unknown(self, canvas):
        assert canvas.add_to_selection('component_nope') is MutationStatus.NOT_FOUND

    def test_remove_recomputes_mirror(self, scenario):
        canvas, a, b = scenario
        canvas.select_multiple([a, b])
        canvas.remove_from_selection(a)
        assert canvas.selected_component_ids == [b]
        assert canvas.selected_component_id == b
        canvas.remove_from_selection(a)
        assert canvas.selected_component_ids == [b]
        canvas.remove_from_selection(b)
        assert canvas.get_selection().is_empty

    def test_remove_in_group_mode_is_noop(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        canvas.remove_from_selection(a)
        assert canvas.selected_group_id == group_id


# ══════════════════════════════════════════════════════════════════════════
# Group selection
# ══════════════════════════════════════════════════════════════════════════

class TestSelectGroup:

    def test_select_group_clears_components(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        c = canvas.create_instance(make_spec(300, 0, 10, 10))
        canvas.select_instance(c)
        assert canvas.select_group(group_id) is MutationStatus.OK
        assert canvas.selected_component_ids == []
        assert canvas.selected_group_id == group_id
        assert_exclusive(canvas)

    def test_select_unknown_group(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        assert canvas.select_group('group_nope') is MutationStatus.NOT_FOUND
        assert canvas.selected_group_id == group_id

    def test_select_group_none_clears(self, grouped_scenario):
        canvas, group_id, a, b = grouped_scenario
        canvas.select_group(None)
        assert canvas.get_selection().is_empty

    def test_selection_snapshot_is_immutable(self, scenario):
        canvas, a, b = scenario
        canvas.select_instance(a)
        selection = canvas.get_selection()
        with pytest.raises(AttributeError):
            selection.group_id = 'group_x'
        canvas.select_instance(b)
        assert selection.component_id == a
