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

"""Render ops shared by the recording and Cairo renderers."""

# Standard Library
import dataclasses
import math


#============================================
@dataclasses.dataclass(frozen=True)
class LineOp:
	p1: tuple[float, float]
	p2: tuple[float, float]
	width: float
	cap: str = "butt"
	color: object | None = None
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class CircleOp:
	center: tuple[float, float]
	radius: float
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class TextOp:
	x: float
	y: float
	text: str
	font_size: float
	font_name: str = "Arial"
	anchor: str = "middle"
	valign: str = "middle"
	weight: str = "normal"
	color: object | None = None
	z: int = 0
	op_id: str | None = None


#============================================
def _hex_to_rgba(text):
	digits = text[1:]
	if len(digits) == 3:
		digits = "".join(ch * 2 for ch in digits)
	if len(digits) != 6:
		return None
	try:
		channels = [int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4)]
	except ValueError:
		return None
	return (channels[0], channels[1], channels[2], 1.0)


#============================================
def _color_to_rgba(color):
	"""Return color as an (r, g, b, a) tuple in 0..1, or None.

	Accepts "#rgb" and "#rrggbb" strings and RGB(A) tuples in either 0..1
	or 0..255 scale. Named colors are not resolved.
	"""
	if isinstance(color, str):
		text = color.strip()
		if not text.startswith("#"):
			return None
		return _hex_to_rgba(text)
	if isinstance(color, (tuple, list)) and len(color) in (3, 4):
		rgb = list(color[:3])
		divisor = 255.0 if max(rgb) > 1.0 else 1.0
		alpha = min(color[3], 1.0) if len(color) == 4 else 1.0
		return tuple(min(value / divisor, 1.0) for value in rgb) + (alpha,)
	return None


#============================================
def sort_ops(ops):
	"""Return ops ordered by z, keeping emission order within one z."""
	return sorted(ops, key=lambda op: getattr(op, "z", 0))


#============================================
def set_cairo_color(context, color):
	rgba = _color_to_rgba(color)
	if not rgba:
		return False
	r, g, b, a = rgba
	if a >= 1.0:
		context.set_source_rgb(r, g, b)
	else:
		context.set_source_rgba(r, g, b, a)
	return True


#============================================
def _set_cairo_line_cap(context, cap):
	if cap == "round":
		context.set_line_cap(1)
	elif cap == "square":
		context.set_line_cap(2)
	else:
		context.set_line_cap(0)


#============================================
def _text_origin(context, op):
	"""Return the cairo baseline origin that puts op.text on its anchor."""
	extents = context.text_extents(op.text)
	x = op.x
	y = op.y
	if op.anchor == "middle":
		x -= extents.x_bearing + extents.width / 2.0
	elif op.anchor == "end":
		x -= extents.x_bearing + extents.width
	if op.valign == "middle":
		y -= extents.y_bearing + extents.height / 2.0
	elif op.valign == "top":
		y -= extents.y_bearing
	elif op.valign == "bottom":
		y -= extents.y_bearing + extents.height
	return x, y


#============================================
def ops_to_cairo(context, ops):
	"""Draw ops on a caller-owned pycairo context."""
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			context.set_line_width(op.width)
			_set_cairo_line_cap(context, op.cap)
			if not set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.move_to(op.p1[0], op.p1[1])
			context.line_to(op.p2[0], op.p2[1])
			context.stroke()
			continue
		if isinstance(op, CircleOp):
			context.new_path()
			context.arc(op.center[0], op.center[1], op.radius, 0, 2 * math.pi)
			if op.fill and op.fill != "none":
				if not set_cairo_color(context, op.fill):
					context.set_source_rgb(0, 0, 0)
				if op.stroke:
					context.fill_preserve()
				else:
					context.fill()
			if op.stroke:
				if not set_cairo_color(context, op.stroke):
					context.set_source_rgb(0, 0, 0)
				context.set_line_width(op.stroke_width)
				context.stroke()
			continue
		if isinstance(op, TextOp):
			weight = 1 if op.weight == "bold" else 0
			context.select_font_face(op.font_name, 0, weight)
			context.set_font_size(op.font_size)
			if not set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			x, y = _text_origin(context, op)
			context.move_to(x, y)
			context.show_text(op.text)
			context.new_path()
