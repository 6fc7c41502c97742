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

"""Pure layout of a Newman projection into circle, bond and label geometry.

Angles follow canvas conventions: 0 degrees points along +x and positive
angles turn towards +y, which is down on screen.
"""

# Standard Library
import dataclasses
import math

# local repo modules
from .config import GROUP_COUNT
from .config import NewmanConfig


SLOT_SPACING_DEG = 360.0 / GROUP_COUNT
CENTER_DOT_RADIUS = 3.0


#============================================
@dataclasses.dataclass(frozen=True)
class BackCircle:
	center: tuple[float, float]
	radius: float
	stroke_width: float


#============================================
@dataclasses.dataclass(frozen=True)
class CenterDot:
	center: tuple[float, float]
	radius: float = CENTER_DOT_RADIUS


#============================================
@dataclasses.dataclass(frozen=True)
class BondPlan:
	"""One drawn bond with its substituent label.

	angle is the total bond direction in degrees, offsets included.
	"""
	start: tuple[float, float]
	end: tuple[float, float]
	label_anchor: tuple[float, float]
	label_text: str
	angle: float

	def length(self) -> float:
		return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


#============================================
@dataclasses.dataclass(frozen=True)
class DiagramPlan:
	center_point: tuple[float, float]
	back_circle: BackCircle
	back_bonds: tuple[BondPlan, ...]
	front_bonds: tuple[BondPlan, ...]
	center_dot: CenterDot
	bond_width: float
	font_size: float


#============================================
def slot_angles(offset: float) -> tuple[float, ...]:
	"""Return the three slot directions in degrees, each shifted by offset."""
	return tuple(SLOT_SPACING_DEG * index + offset for index in range(GROUP_COUNT))


#============================================
def ray_point(origin: tuple[float, float], distance: float, theta: float) -> tuple[float, float]:
	"""Return the point at distance from origin along direction theta (radians)."""
	return (
		origin[0] + distance * math.cos(theta),
		origin[1] + distance * math.sin(theta),
	)


#============================================
def back_bond_angles(config: NewmanConfig) -> tuple[float, ...]:
	return slot_angles(config.settings.back_angle)


#============================================
def front_bond_angles(config: NewmanConfig) -> tuple[float, ...]:
	# rotation only turns the front carbon, the back one stays put
	return slot_angles(config.rotation + config.settings.front_angle)


#============================================
def _bond_plans(center, angles, groups, start_radius, settings):
	bonds = []
	for angle, label in zip(angles, groups):
		theta = math.radians(angle)
		end = ray_point(center, settings.bond_length, theta)
		if start_radius is None:
			start = center
		else:
			start = ray_point(center, start_radius, theta)
		bonds.append(BondPlan(
			start=start,
			end=end,
			label_anchor=ray_point(end, settings.substituent_margin, theta),
			label_text=label,
			angle=angle,
		))
	return tuple(bonds)


#============================================
def compute_plan(config: NewmanConfig, center_point: tuple[float, float]) -> DiagramPlan:
	"""Compute the full diagram for one configuration.

	Back bonds run from the edge of the back circle to the bond end; front
	bonds run from the center point. Labels sit substituent_margin further out
	on the same ray as their bond.

	Args:
		config: settings, rotation and labels to lay out. Only read.
		center_point: (x, y) center of the drawing surface.

	Returns:
		DiagramPlan: a new value on every call.
	"""
	settings = config.settings
	center = (float(center_point[0]), float(center_point[1]))
	back_bonds = _bond_plans(
		center,
		back_bond_angles(config),
		tuple(config.back_groups),
		settings.circle_radius,
		settings,
	)
	front_bonds = _bond_plans(
		center,
		front_bond_angles(config),
		tuple(config.front_groups),
		None,
		settings,
	)
	return DiagramPlan(
		center_point=center,
		back_circle=BackCircle(
			center=center,
			radius=settings.circle_radius,
			stroke_width=settings.arc_thickness,
		),
		back_bonds=back_bonds,
		front_bonds=front_bonds,
		center_dot=CenterDot(center=center),
		bond_width=settings.bond_thickness,
		font_size=settings.font_size,
	)
