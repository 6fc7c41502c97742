"""Tests for the renderers and draw_plan()."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_newman_to_sys_path()

# local repo modules
from newman import config
from newman import layout
from newman import render_ops
from newman import renderer
from newman import widget as widget_module


#============================================
class FakeCanvas:
	"""Stands in for tkinter.Canvas and records every call."""

	def __init__(self):
		self.calls = []

	def delete(self, *tags):
		self.calls.append(("delete", tags, {}))

	def create_oval(self, *coords, **options):
		self.calls.append(("oval", coords, options))

	def create_line(self, *coords, **options):
		self.calls.append(("line", coords, options))

	def create_text(self, *coords, **options):
		self.calls.append(("text", coords, options))


#============================================
def _plan(rotation=0.0):
	cfg = config.NewmanConfig()
	cfg.set_rotation(rotation)
	cfg.set_groups("front", ["CH3", "OH", "Br"])
	return layout.compute_plan(cfg, (100.0, 100.0))


#============================================
def test_base_renderer_is_abstract():
	base = renderer.Renderer()
	with pytest.raises(NotImplementedError):
		base.clear()
	with pytest.raises(NotImplementedError):
		renderer.draw_plan(base, _plan())


#============================================
def test_draw_plan_records_primitives():
	surface = renderer.OpsRenderer()
	plan = _plan()
	renderer.draw_plan(surface, plan)
	circles = [op for op in surface.ops if isinstance(op, render_ops.CircleOp)]
	lines = [op for op in surface.ops if isinstance(op, render_ops.LineOp)]
	texts = [op for op in surface.ops if isinstance(op, render_ops.TextOp)]
	assert len(circles) == 2
	assert len(lines) == 6
	assert len(texts) == 6
	ring, dot = circles
	assert ring.fill is None
	assert ring.stroke == renderer.LINE_COLOR
	assert ring.stroke_width == 3.5
	assert ring.radius == 40.0
	assert dot.fill == renderer.LINE_COLOR
	assert dot.radius == 3.0
	assert dot.stroke is None
	for line in lines:
		assert line.width == 3.5
	for text in texts:
		assert text.anchor == "middle"
		assert text.valign == "middle"
		assert text.font_size == 14.0
		assert text.font_name == "Arial"
		assert text.color == renderer.LABEL_COLOR


#============================================
def test_draw_plan_clears_previous_frame():
	surface = renderer.OpsRenderer()
	renderer.draw_plan(surface, _plan())
	renderer.draw_plan(surface, _plan(rotation=10.0))
	assert len(surface.ops) == 14


#============================================
def test_ops_renderer_alignment_mapping():
	surface = renderer.OpsRenderer(font_name="Helvetica")
	surface.draw_text((1.0, 2.0), "OH", 12, "#000", h_align="left", v_align="top")
	surface.draw_text((1.0, 2.0), "OH", 12, "#000", h_align="right", v_align="bottom")
	first, second = surface.ops
	assert (first.anchor, first.valign) == ("start", "top")
	assert (second.anchor, second.valign) == ("end", "bottom")
	assert first.font_name == "Helvetica"


#============================================
def test_tk_anchor():
	assert renderer.tk_anchor("center", "middle") == "center"
	assert renderer.tk_anchor("left", "middle") == "w"
	assert renderer.tk_anchor("right", "top") == "ne"
	assert renderer.tk_anchor("center", "bottom") == "s"


#============================================
def test_tk_canvas_renderer():
	canvas = FakeCanvas()
	renderer.draw_plan(renderer.TkCanvasRenderer(canvas), _plan())
	kinds = [call[0] for call in canvas.calls]
	assert kinds[0] == "delete"
	assert canvas.calls[0][1] == ("all",)
	assert kinds.count("oval") == 2
	assert kinds.count("line") == 6
	assert kinds.count("text") == 6
	ring = canvas.calls[1]
	assert ring[1] == (60.0, 60.0, 140.0, 140.0)
	assert ring[2]["outline"] == "#333"
	assert ring[2]["width"] == 3.5
	assert ring[2]["tags"] == ("back_circle",)
	dot = canvas.calls[-1]
	assert dot[1] == (97.0, 97.0, 103.0, 103.0)
	assert dot[2]["fill"] == "#333"
	assert dot[2]["outline"] == ""
	texts = [call for call in canvas.calls if call[0] == "text"]
	front_texts = [call[2]["text"] for call in texts[3:]]
	assert front_texts == ["CH3", "OH", "Br"]
	assert texts[0][2]["font"] == ("Arial", -14)
	assert texts[0][2]["anchor"] == "center"


#============================================
def test_widget_on_tk_canvas():
	canvas = FakeCanvas()
	projection = widget_module.NewmanProjection(renderer.TkCanvasRenderer(canvas), 200, 200)
	projection.set_rotation(45)
	deletes = [call for call in canvas.calls if call[0] == "delete"]
	assert len(deletes) == 2


#============================================
def test_cairo_renderer_paints_surface():
	pytest.importorskip("cairo")
	surface, context = renderer.create_image_surface(100, 100)
	cairo_renderer = renderer.CairoRenderer(context, 100, 100)
	widget_module.NewmanProjection(cairo_renderer, 100, 100)
	surface.flush()
	data = surface.get_data()
	stride = surface.get_stride()
	# ARGB32 is stored as BGRA on little endian hosts
	center = 50 * stride + 50 * 4
	assert bytes(data[center:center + 4]) == b"\x33\x33\x33\xff"
	assert bytes(data[0:4]) == b"\xff\xff\xff\xff"
	assert len(cairo_renderer.ops) == 14


#============================================
def test_front_bonds_start_at_center_in_ops():
	surface = renderer.OpsRenderer()
	renderer.draw_plan(surface, _plan(rotation=33.0))
	for op in surface.ops:
		if op.op_id.startswith("front_bond_"):
			assert op.p1 == (100.0, 100.0)
			length = math.hypot(op.p2[0] - op.p1[0], op.p2[1] - op.p1[1])
			assert length == pytest.approx(80.0)
