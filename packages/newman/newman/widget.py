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

"""Interactive Newman projection: configuration, layout and redraw."""

# Standard Library
import dataclasses
import logging

# local repo modules
from . import layout
from . import renderer as renderer_module
from .config import NewmanConfig


logger = logging.getLogger(__name__)


#============================================
class NewmanProjection:
	"""One projection bound to one drawing surface.

	Every public mutator recomputes the layout and redraws before it returns.
	Mutations that are ignored (unknown key, label index out of range) do not
	redraw.
	"""

	def __init__(self, renderer, width, height,
			line_color=renderer_module.LINE_COLOR,
			label_color=renderer_module.LABEL_COLOR):
		self.renderer = renderer
		self.width = width
		self.height = height
		self.center_point = (width / 2.0, height / 2.0)
		self.line_color = line_color
		self.label_color = label_color
		self._config = NewmanConfig()
		self.draw()

	#============================================
	@property
	def settings(self) -> dict:
		return dataclasses.asdict(self._config.settings)

	@property
	def rotation(self) -> float:
		return self._config.rotation

	@property
	def front_groups(self) -> tuple[str, ...]:
		return tuple(self._config.front_groups)

	@property
	def back_groups(self) -> tuple[str, ...]:
		return tuple(self._config.back_groups)

	#============================================
	def layout(self) -> layout.DiagramPlan:
		return layout.compute_plan(self._config, self.center_point)

	#============================================
	def draw(self) -> None:
		plan = self.layout()
		logger.debug("redraw rotation=%s front=%s back=%s",
				self._config.rotation, self._config.front_groups, self._config.back_groups)
		renderer_module.draw_plan(self.renderer, plan,
				line_color=self.line_color, label_color=self.label_color)

	#============================================
	def update_setting(self, key, value) -> None:
		if self._config.set(key, value):
			self.draw()

	#============================================
	def update_settings(self, settings: dict) -> None:
		"""Apply every known key of settings and redraw once.

		Values are staged on a copy of the configuration, so a value that
		float() rejects raises before anything is stored.
		"""
		staged = self._config.snapshot()
		for key, value in settings.items():
			staged.set(key, value)
		self._config = staged
		self.draw()

	#============================================
	def set_front_groups(self, groups) -> None:
		self._config.set_groups("front", groups)
		self.draw()

	#============================================
	def set_back_groups(self, groups) -> None:
		self._config.set_groups("back", groups)
		self.draw()

	#============================================
	def set_front_group(self, index, text) -> None:
		if self._config.set_group("front", index, text):
			self.draw()

	#============================================
	def set_back_group(self, index, text) -> None:
		if self._config.set_group("back", index, text):
			self.draw()

	#============================================
	def set_rotation(self, degrees) -> None:
		self._config.set_rotation(degrees)
		self.draw()
