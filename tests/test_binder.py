"""Tests for the toolkit-free input binder."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_newman_to_sys_path()

# local repo modules
from newman import binder
from newman import renderer
from newman import widget as widget_module


#============================================
def _bound():
	projection = widget_module.NewmanProjection(renderer.OpsRenderer(), 400, 400)
	return projection, binder.InputBinder(projection)


#============================================
@pytest.mark.parametrize("text,expected", [
	("3.5", 3.5),
	(" 80 ", 80.0),
	("-12", -12.0),
	(7, 7.0),
	("", None),
	("   ", None),
	(None, None),
	("abc", None),
	("nan", None),
	("inf", None),
	(float("nan"), None),
])
def test_parse_number(text, expected):
	assert binder.parse_number(text) == expected


#============================================
def test_clamp():
	assert binder.clamp(500, 40, 150) == 150
	assert binder.clamp(-1, 0, 10) == 0
	assert binder.clamp(5, 0, 10) == 5


#============================================
def test_format_value():
	assert binder.format_value(80.0) == "80"
	assert binder.format_value(3.5) == "3.5"
	assert binder.format_value(30.0, "°") == "30°"


#============================================
def test_control_table_matches_settings():
	projection, _panel = _bound()
	keys = [spec.setting_key for spec in binder.SETTING_CONTROLS]
	assert sorted(keys) == sorted(projection.settings)
	for spec in binder.SETTING_CONTROLS:
		assert spec.minimum < spec.maximum
	suffixed = {spec.control_id for spec in binder.SETTING_CONTROLS if spec.suffix}
	assert suffixed == {"back-angle", "front-angle"}


#============================================
def test_initial_displays():
	_projection, panel = _bound()
	assert panel.displays["bond-length"] == "80"
	assert panel.displays["bond-thickness"] == "3.5"
	assert panel.displays["front-angle"] == "30°"
	assert panel.displays["rotation"] == "0°"
	assert panel.entry_values["font-size"] == "14"
	assert panel.slider_positions["circle-radius"] == 40.0


#============================================
def test_slider_updates_setting_and_display():
	projection, panel = _bound()
	assert panel.on_setting_slider("back-angle", "45") is True
	assert projection.settings["back_angle"] == 45.0
	assert panel.displays["back-angle"] == "45°"
	assert panel.entry_values["back-angle"] == "45"
	assert panel.slider_positions["back-angle"] == 45.0


#============================================
def test_entry_value_beyond_slider_range():
	projection, panel = _bound()
	assert panel.on_setting_entry("bond-length", "500") is True
	assert projection.settings["bond_length"] == 500.0
	assert panel.slider_positions["bond-length"] == 150.0
	assert panel.displays["bond-length"] == "500"
	assert panel.entry_values["bond-length"] == "500"


#============================================
@pytest.mark.parametrize("text", ["", "abc", "nan", "1e999"])
def test_entry_rejects_malformed_numbers(text):
	projection, panel = _bound()
	before = projection.settings
	assert panel.on_setting_entry("bond-length", text) is False
	assert projection.settings == before
	assert panel.displays["bond-length"] == "80"


#============================================
def test_unknown_control():
	_projection, panel = _bound()
	with pytest.raises(ValueError):
		panel.on_setting_slider("wobble", "1")


#============================================
def test_rotation_uses_whole_degrees():
	projection, panel = _bound()
	assert panel.on_rotation("45.7") is True
	assert projection.rotation == 45.0
	assert panel.displays["rotation"] == "45°"
	assert panel.on_rotation("spin") is False
	assert projection.rotation == 45.0


#============================================
def test_group_inputs():
	projection, panel = _bound()
	panel.on_group("front", 0, "CH3")
	panel.on_group("back", 2, "Cl")
	assert projection.front_groups == ("CH3", "H", "H")
	assert projection.back_groups == ("H", "H", "Cl")
	panel.on_group("front", 0, "")
	assert projection.front_groups == ("H", "H", "H")


#============================================
def test_group_input_out_of_range_and_bad_side():
	projection, panel = _bound()
	panel.on_group("back", 3, "Cl")
	assert projection.back_groups == ("H", "H", "H")
	with pytest.raises(ValueError):
		panel.on_group("side", 0, "Cl")


#============================================
def test_group_input_ids():
	assert binder.GROUP_INPUT_IDS["front"] == ("front1", "front2", "front3")
	assert binder.GROUP_INPUT_IDS["back"] == ("back1", "back2", "back3")
