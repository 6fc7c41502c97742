#--------------------------------------------------------------------------
#     This file is part of newman-projection - a Newman projection library
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Input binders turning control events into NewmanProjection calls.

InputBinder holds the event handling and the state a control panel shows
(slider positions, entry texts, value labels) without any toolkit.
TkInputBinder builds the tkinter controls on top of it.
"""

# Standard Library
import dataclasses
import logging
import math

# local repo modules
from .config import GROUP_COUNT
from .config import IMPLICIT_GROUP


logger = logging.getLogger(__name__)

DEGREE_SUFFIX = "°"


#============================================
@dataclasses.dataclass(frozen=True)
class ControlSpec:
	control_id: str
	setting_key: str
	label: str
	minimum: float
	maximum: float
	resolution: float = 1.0
	suffix: str = ""


SETTING_CONTROLS = (
	ControlSpec("bond-thickness", "bond_thickness", "Bond thickness", 1.0, 10.0, 0.5),
	ControlSpec("bond-length", "bond_length", "Bond length", 40.0, 150.0),
	ControlSpec("circle-radius", "circle_radius", "Circle radius", 10.0, 100.0),
	ControlSpec("back-angle", "back_angle", "Back angle", 0.0, 360.0, suffix=DEGREE_SUFFIX),
	ControlSpec("front-angle", "front_angle", "Front angle", 0.0, 360.0, suffix=DEGREE_SUFFIX),
	ControlSpec("arc-thickness", "arc_thickness", "Arc thickness", 1.0, 10.0, 0.5),
	ControlSpec("substituent-margin", "substituent_margin", "Substituent margin", 0.0, 50.0),
	ControlSpec("font-size", "font_size", "Font size", 8.0, 32.0),
)
CONTROLS_BY_ID = {spec.control_id: spec for spec in SETTING_CONTROLS}

ROTATION_CONTROL = ControlSpec("rotation", "rotation", "Rotation", 0.0, 360.0, suffix=DEGREE_SUFFIX)

GROUP_INPUT_IDS = {
	"front": ("front1", "front2", "front3"),
	"back": ("back1", "back2", "back3"),
}


#============================================
def parse_number(text):
	"""Return text as a finite float, or None when it is not one."""
	if text is None:
		return None
	if isinstance(text, (int, float)):
		value = float(text)
	else:
		text = str(text).strip()
		if not text:
			return None
		try:
			value = float(text)
		except ValueError:
			return None
	if not math.isfinite(value):
		return None
	return value


#============================================
def clamp(value, minimum, maximum):
	return min(max(value, minimum), maximum)


#============================================
def format_value(value, suffix=""):
	"""Format a number the way the value labels show it: 80 not 80.0."""
	if float(value).is_integer():
		text = str(int(value))
	else:
		text = str(value)
	return text + suffix


#============================================
class InputBinder:
	"""Toolkit-free control panel bound to one NewmanProjection.

	Attributes:
		displays: value label text per control id, rotation included.
		slider_positions: slider value per control id, kept inside the range.
		entry_values: number entry text per setting control id.
	"""

	def __init__(self, widget):
		self.widget = widget
		self.displays = {}
		self.slider_positions = {}
		self.entry_values = {}
		settings = widget.settings
		for spec in SETTING_CONTROLS:
			value = settings[spec.setting_key]
			self.displays[spec.control_id] = format_value(value, spec.suffix)
			self.entry_values[spec.control_id] = format_value(value)
			self.slider_positions[spec.control_id] = clamp(value, spec.minimum, spec.maximum)
		rotation = widget.rotation
		self.displays[ROTATION_CONTROL.control_id] = format_value(rotation, ROTATION_CONTROL.suffix)
		self.slider_positions[ROTATION_CONTROL.control_id] = rotation

	#============================================
	def _control(self, control_id) -> ControlSpec:
		try:
			return CONTROLS_BY_ID[control_id]
		except KeyError as error:
			raise ValueError("Unknown control '%s'" % control_id) from error

	#============================================
	def on_setting_slider(self, control_id, text) -> bool:
		spec = self._control(control_id)
		value = parse_number(text)
		if value is None:
			logger.debug("rejecting slider value %r for %s", text, control_id)
			return False
		self.widget.update_setting(spec.setting_key, value)
		self.slider_positions[control_id] = value
		self.entry_values[control_id] = format_value(value)
		self.displays[control_id] = format_value(value, spec.suffix)
		return True

	#============================================
	def on_setting_entry(self, control_id, text) -> bool:
		"""Apply a typed value; the slider is clamped, the setting is not."""
		spec = self._control(control_id)
		value = parse_number(text)
		if value is None:
			logger.debug("rejecting entry value %r for %s", text, control_id)
			return False
		self.widget.update_setting(spec.setting_key, value)
		self.entry_values[control_id] = str(text).strip()
		self.slider_positions[control_id] = clamp(value, spec.minimum, spec.maximum)
		self.displays[control_id] = format_value(value, spec.suffix)
		return True

	#============================================
	def on_rotation(self, text) -> bool:
		value = parse_number(text)
		if value is None:
			logger.debug("rejecting rotation %r", text)
			return False
		angle = int(value)
		self.widget.set_rotation(angle)
		self.slider_positions[ROTATION_CONTROL.control_id] = angle
		self.displays[ROTATION_CONTROL.control_id] = format_value(angle, ROTATION_CONTROL.suffix)
		return True

	#============================================
	def on_group(self, side, index, text) -> None:
		label = text or IMPLICIT_GROUP
		if side == "front":
			self.widget.set_front_group(index, label)
		elif side == "back":
			self.widget.set_back_group(index, label)
		else:
			raise ValueError("Unsupported side '%s'" % side)


#============================================
class TkInputBinder(InputBinder):
	"""Builds sliders, number entries and label entries inside a tk parent."""

	def __init__(self, widget, parent):
		super().__init__(widget)
		# deferred so InputBinder works on interpreters built without Tk
		import tkinter

		self._tk = tkinter
		self.frame = tkinter.Frame(parent)
		self.slider_vars = {}
		self.entry_vars = {}
		self.display_vars = {}
		self.group_vars = {}
		row = 0
		row = self._build_rotation(row)
		for spec in SETTING_CONTROLS:
			row = self._build_setting(spec, row)
		self._build_groups(row)

	#============================================
	def _build_rotation(self, row):
		tk = self._tk
		spec = ROTATION_CONTROL
		tk.Label(self.frame, text=spec.label).grid(row=row, column=0, sticky="w")
		slider_var = tk.DoubleVar(value=self.slider_positions[spec.control_id])
		tk.Scale(
			self.frame, from_=spec.minimum, to=spec.maximum, resolution=spec.resolution,
			orient=tk.HORIZONTAL, showvalue=0, variable=slider_var,
			command=self._rotation_moved,
		).grid(row=row, column=1, sticky="ew")
		display_var = tk.StringVar(value=self.displays[spec.control_id])
		tk.Label(self.frame, textvariable=display_var, width=6).grid(row=row, column=3)
		self.slider_vars[spec.control_id] = slider_var
		self.display_vars[spec.control_id] = display_var
		return row + 1

	#============================================
	def _build_setting(self, spec, row):
		tk = self._tk
		tk.Label(self.frame, text=spec.label).grid(row=row, column=0, sticky="w")
		slider_var = tk.DoubleVar(value=self.slider_positions[spec.control_id])
		tk.Scale(
			self.frame, from_=spec.minimum, to=spec.maximum, resolution=spec.resolution,
			orient=tk.HORIZONTAL, showvalue=0, variable=slider_var,
			command=lambda text, control_id=spec.control_id: self._slider_moved(control_id, text),
		).grid(row=row, column=1, sticky="ew")
		entry_var = tk.StringVar(value=self.entry_values[spec.control_id])
		entry = tk.Entry(self.frame, textvariable=entry_var, width=6)
		entry.grid(row=row, column=2)
		entry.bind(
			"<KeyRelease>",
			lambda _event, control_id=spec.control_id: self._entry_changed(control_id),
		)
		display_var = tk.StringVar(value=self.displays[spec.control_id])
		tk.Label(self.frame, textvariable=display_var, width=6).grid(row=row, column=3)
		self.slider_vars[spec.control_id] = slider_var
		self.entry_vars[spec.control_id] = entry_var
		self.display_vars[spec.control_id] = display_var
		return row + 1

	#============================================
	def _build_groups(self, row):
		tk = self._tk
		groups = {"front": self.widget.front_groups, "back": self.widget.back_groups}
		for side, input_ids in GROUP_INPUT_IDS.items():
			tk.Label(self.frame, text="%s groups" % side.capitalize()).grid(row=row, column=0, sticky="w")
			for index in range(GROUP_COUNT):
				var = tk.StringVar(value=groups[side][index])
				entry = tk.Entry(self.frame, textvariable=var, width=6)
				entry.grid(row=row, column=1 + index)
				entry.bind(
					"<KeyRelease>",
					lambda _event, side=side, index=index: self._group_changed(side, index),
				)
				self.group_vars[input_ids[index]] = var
			row += 1
		return row

	#============================================
	def _sync(self, control_id):
		if control_id in self.entry_vars and self.entry_vars[control_id].get() != self.entry_values[control_id]:
			self.entry_vars[control_id].set(self.entry_values[control_id])
		if self.slider_vars[control_id].get() != self.slider_positions[control_id]:
			self.slider_vars[control_id].set(self.slider_positions[control_id])
		self.display_vars[control_id].set(self.displays[control_id])

	#============================================
	def _slider_moved(self, control_id, text):
		value = parse_number(text)
		# Tk also calls back when _sync moves the slider
		if value is not None and value == self.slider_positions.get(control_id):
			return
		if self.on_setting_slider(control_id, text):
			self._sync(control_id)

	#============================================
	def _entry_changed(self, control_id):
		text = self.entry_vars[control_id].get()
		if self.on_setting_entry(control_id, text):
			self._sync(control_id)

	#============================================
	def _rotation_moved(self, text):
		if self.on_rotation(text):
			self.display_vars[ROTATION_CONTROL.control_id].set(
				self.displays[ROTATION_CONTROL.control_id])

	#============================================
	def _group_changed(self, side, index):
		input_id = GROUP_INPUT_IDS[side][index]
		self.on_group(side, index, self.group_vars[input_id].get())
