"""
Tests for style scaling helpers used by proportional group resize.
"""
import pytest
from models.canvas import ComponentProperties
from utils.style_scaling import round_half_up, scale_pixel_string, scale_number, scale_style_properties


class TestPixelStrings:

    def test_scale_px(self):
        assert scale_pixel_string('20px', 1.5) == '30px'

    @pytest.mark.parametrize('value', ['2em', '1.5rem', '12.5px', 'px', ' 12px', 'large'])
    def test_non_matching_unchanged(self, value):
        assert scale_pixel_string(value, 3) == value

    def test_non_strings_unchanged(self):
        assert scale_pixel_string(None, 2) is None
        assert scale_pixel_string(12, 2) == 12

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2
        assert scale_pixel_string('5px', 0.5) == '3px'


class TestNumbers:

    def test_scale_number_rounds(self):
        assert scale_number(4, 1.5) == 6
        assert scale_number(3, 0.5) == 2

    def test_booleans_untouched(self):
        assert scale_number(True, 10) is True

    def test_strings_untouched(self):
        assert scale_number('4', 2) == '4'


class TestScaleStyleProperties:

    def test_reports_changed_keys(self):
        props = ComponentProperties({'fontSize': '10px', 'borderRadius': 4, 'strokeWidth': 2, 'color': '#000'})
        changed = scale_style_properties(props, 2, 1)
        # strokeWidth follows scale_y == 1
        assert sorted(changed) == ['borderRadius', 'fontSize']
        assert props.to_dict() == {'fontSize': '15px', 'borderRadius': 6, 'strokeWidth': 2, 'color': '#000'}

    def test_identity_changes_nothing(self):
        props = ComponentProperties({'fontSize': '10px', 'borderWidth': 1})
        assert scale_style_properties(props, 1, 1) == []

    def test_absent_keys_not_added(self):
        props = ComponentProperties({'text': 'Hi'})
        scale_style_properties(props, 3, 3)
        assert props.to_dict() == {'text': 'Hi'}
