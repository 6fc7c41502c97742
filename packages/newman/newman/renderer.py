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

"""Drawing surfaces for a DiagramPlan.

A renderer only knows five primitives; draw_plan() is the single place that
decides what a Newman projection looks like in terms of them.
"""

# local repo modules
from . import render_ops
from .layout import DiagramPlan


LINE_COLOR = "#333"
LABEL_COLOR = "#000"
FONT_NAME = "Arial"

H_ALIGN_TO_ANCHOR = {
	"left": "start",
	"center": "middle",
	"right": "end",
}

TK_H_ALIGN = {"left": "w", "center": "", "right": "e"}
TK_V_ALIGN = {"top": "n", "middle": "", "bottom": "s"}


#============================================
class Renderer:
	"""Primitive drawing interface consumed by draw_plan()."""

	def clear(self):
		raise NotImplementedError

	def stroke_circle(self, center, radius, stroke_width, color, op_id=None):
		raise NotImplementedError

	def stroke_line(self, start, end, stroke_width, color, op_id=None):
		raise NotImplementedError

	def fill_circle(self, center, radius, color, op_id=None):
		raise NotImplementedError

	def draw_text(self, position, text, font_size, color,
			h_align="center", v_align="middle", op_id=None):
		raise NotImplementedError


#============================================
class OpsRenderer(Renderer):
	"""Records primitives as render ops instead of drawing them."""

	def __init__(self, font_name=FONT_NAME):
		self.font_name = font_name
		self.ops = []

	def _emit(self, op):
		self.ops.append(op)

	def clear(self):
		self.ops = []

	def stroke_circle(self, center, radius, stroke_width, color, op_id=None):
		self._emit(render_ops.CircleOp(
			center=tuple(center),
			radius=radius,
			fill=None,
			stroke=color,
			stroke_width=stroke_width,
			op_id=op_id,
		))

	def stroke_line(self, start, end, stroke_width, color, op_id=None):
		self._emit(render_ops.LineOp(
			tuple(start),
			tuple(end),
			width=stroke_width,
			color=color,
			op_id=op_id,
		))

	def fill_circle(self, center, radius, color, op_id=None):
		self._emit(render_ops.CircleOp(
			center=tuple(center),
			radius=radius,
			fill=color,
			op_id=op_id,
		))

	def draw_text(self, position, text, font_size, color,
			h_align="center", v_align="middle", op_id=None):
		self._emit(render_ops.TextOp(
			x=position[0],
			y=position[1],
			text=text,
			font_size=font_size,
			font_name=self.font_name,
			anchor=H_ALIGN_TO_ANCHOR.get(h_align, "middle"),
			valign=v_align,
			color=color,
			op_id=op_id,
		))


#============================================
class CairoRenderer(OpsRenderer):
	"""Draws straight onto a pycairo context owned by the caller.

	Every primitive is still recorded in ops, so the last frame can be
	inspected after drawing.
	"""

	def __init__(self, context, width, height, background="#fff", font_name=FONT_NAME):
		super().__init__(font_name=font_name)
		self.context = context
		self.width = width
		self.height = height
		self.background = background

	def _emit(self, op):
		super()._emit(op)
		render_ops.ops_to_cairo(self.context, [op])

	def clear(self):
		super().clear()
		context = self.context
		context.save()
		if not render_ops.set_cairo_color(context, self.background):
			context.set_source_rgb(1, 1, 1)
		context.rectangle(0, 0, self.width, self.height)
		context.fill()
		context.restore()


#============================================
def create_image_surface(width, height):
	"""Return (surface, context) for an in-memory ARGB32 cairo image."""
	try:
		import cairo
	except ImportError as exc:
		raise RuntimeError("Cairo rendering requires pycairo.") from exc
	surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, int(width), int(height))
	return surface, cairo.Context(surface)


#============================================
def tk_anchor(h_align, v_align):
	anchor = TK_V_ALIGN.get(v_align, "") + TK_H_ALIGN.get(h_align, "")
	return anchor or "center"


#============================================
class TkCanvasRenderer(Renderer):
	"""Draws on a tkinter.Canvas."""

	def __init__(self, canvas, font_name=FONT_NAME):
		self.canvas = canvas
		self.font_name = font_name

	def clear(self):
		self.canvas.delete("all")

	def stroke_circle(self, center, radius, stroke_width, color, op_id=None):
		x, y = center
		self.canvas.create_oval(
			x - radius, y - radius, x + radius, y + radius,
			outline=color, width=stroke_width, tags=_tags(op_id),
		)

	def stroke_line(self, start, end, stroke_width, color, op_id=None):
		self.canvas.create_line(
			start[0], start[1], end[0], end[1],
			fill=color, width=stroke_width, tags=_tags(op_id),
		)

	def fill_circle(self, center, radius, color, op_id=None):
		x, y = center
		self.canvas.create_oval(
			x - radius, y - radius, x + radius, y + radius,
			fill=color, outline="", tags=_tags(op_id),
		)

	def draw_text(self, position, text, font_size, color,
			h_align="center", v_align="middle", op_id=None):
		# negative size means pixels in Tk
		font = (self.font_name, -int(round(font_size)))
		self.canvas.create_text(
			position[0], position[1],
			text=text, font=font, fill=color,
			anchor=tk_anchor(h_align, v_align), tags=_tags(op_id),
		)


#============================================
def _tags(op_id):
	if op_id:
		return (op_id,)
	return ()


#============================================
def draw_plan(renderer: Renderer, plan: DiagramPlan,
		line_color: str = LINE_COLOR, label_color: str = LABEL_COLOR) -> None:
	"""Clear the surface and draw every part of plan."""
	renderer.clear()
	circle = plan.back_circle
	renderer.stroke_circle(circle.center, circle.radius, circle.stroke_width,
			line_color, op_id="back_circle")
	for index, bond in enumerate(plan.back_bonds):
		renderer.stroke_line(bond.start, bond.end, plan.bond_width, line_color,
				op_id=f"back_bond_{index}")
		renderer.draw_text(bond.label_anchor, bond.label_text, plan.font_size,
				label_color, op_id=f"back_label_{index}")
	for index, bond in enumerate(plan.front_bonds):
		renderer.stroke_line(bond.start, bond.end, plan.bond_width, line_color,
				op_id=f"front_bond_{index}")
		renderer.draw_text(bond.label_anchor, bond.label_text, plan.font_size,
				label_color, op_id=f"front_label_{index}")
	dot = plan.center_dot
	renderer.fill_circle(dot.center, dot.radius, line_color, op_id="center_dot")
