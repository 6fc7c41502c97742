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

"""Adjustable settings, rotation and substituent labels of one projection."""

# Standard Library
import copy
import dataclasses
import logging


logger = logging.getLogger(__name__)

SIDES = ("front", "back")
GROUP_COUNT = 3
IMPLICIT_GROUP = "H"
DEFAULT_GROUPS = (IMPLICIT_GROUP,) * GROUP_COUNT

# camelCase names accepted from web front ends
SETTING_ALIASES = {
	"bondThickness": "bond_thickness",
	"bondLength": "bond_length",
	"circleRadius": "circle_radius",
	"backAngle": "back_angle",
	"frontAngle": "front_angle",
	"arcThickness": "arc_thickness",
	"substituentMargin": "substituent_margin",
	"fontSize": "font_size",
}


#============================================
@dataclasses.dataclass
class NewmanSettings:
	bond_thickness: float = 3.5
	bond_length: float = 80.0
	circle_radius: float = 40.0
	back_angle: float = 30.0
	front_angle: float = 30.0
	arc_thickness: float = 3.5
	substituent_margin: float = 15.0
	font_size: float = 14.0


SETTING_KEYS = tuple(field.name for field in dataclasses.fields(NewmanSettings))
DEFAULT_SETTINGS = dataclasses.asdict(NewmanSettings())


#============================================
def resolve_setting_key(key) -> str | None:
	"""Return the canonical field name for key, or None when unknown."""
	if not isinstance(key, str):
		return None
	if key in SETTING_KEYS:
		return key
	return SETTING_ALIASES.get(key)


#============================================
def normalize_group_label(text) -> str:
	"""Return text, or the implicit hydrogen label when text is empty."""
	if text is None:
		return IMPLICIT_GROUP
	text = str(text)
	if not text:
		return IMPLICIT_GROUP
	return text


#============================================
def _check_side(side: str) -> str:
	if side not in SIDES:
		raise ValueError("Unsupported side '%s'; expected one of %s" % (side, SIDES))
	return side


#============================================
class NewmanConfig:
	"""Mutable state of one projection: numeric settings, rotation and labels.

	Numeric values are stored without range checks. Negative lengths or a
	circle radius larger than the bond length are accepted and simply give a
	degenerate drawing.
	"""

	def __init__(self):
		self.settings = NewmanSettings()
		self.rotation = 0.0
		self.front_groups = list(DEFAULT_GROUPS)
		self.back_groups = list(DEFAULT_GROUPS)

	#============================================
	def set(self, key, value) -> bool:
		"""Store one numeric setting; unknown keys are ignored.

		Args:
			key (str): snake_case field name or its camelCase alias.
			value: anything float() accepts.

		Returns:
			bool: True when the key was known and the value stored.
		"""
		name = resolve_setting_key(key)
		if name is None:
			logger.debug("ignoring unknown setting %r", key)
			return False
		setattr(self.settings, name, float(value))
		return True

	#============================================
	def get(self, key) -> float:
		name = resolve_setting_key(key)
		if name is None:
			raise KeyError(key)
		return getattr(self.settings, name)

	#============================================
	def groups(self, side: str) -> list[str]:
		if _check_side(side) == "front":
			return self.front_groups
		return self.back_groups

	#============================================
	def set_group(self, side: str, index, text) -> bool:
		"""Replace one label; an index outside 0..2 leaves labels untouched."""
		groups = self.groups(side)
		if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < GROUP_COUNT:
			logger.debug("ignoring %s group index %r", side, index)
			return False
		groups[index] = normalize_group_label(text)
		return True

	#============================================
	def set_groups(self, side: str, groups) -> None:
		"""Replace all three labels of one side."""
		if isinstance(groups, str):
			raise ValueError("%s groups need a sequence of labels, not the string %r" % (side, groups))
		labels = [normalize_group_label(text) for text in groups]
		if len(labels) != GROUP_COUNT:
			raise ValueError(
				"%s groups need exactly %d labels, got %d"
				% (side, GROUP_COUNT, len(labels))
			)
		self.groups(side)[:] = labels

	#============================================
	def set_rotation(self, degrees) -> None:
		# no wraparound, cos/sin take care of periodicity
		self.rotation = float(degrees)

	#============================================
	def snapshot(self) -> "NewmanConfig":
		return copy.deepcopy(self)
