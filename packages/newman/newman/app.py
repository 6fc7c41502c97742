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

"""Tk application showing one Newman projection with its control panel."""

# Standard Library
import argparse
import logging

# local repo modules
from . import binder
from . import logging_config
from . import renderer
from .config import GROUP_COUNT
from .config import resolve_setting_key
from .widget import NewmanProjection


logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


#============================================
def _setting_pair(text):
	"""argparse type for KEY=VALUE settings."""
	key, sep, raw_value = text.partition("=")
	if not sep:
		raise argparse.ArgumentTypeError("expected KEY=VALUE, got '%s'" % text)
	name = resolve_setting_key(key.strip())
	if name is None:
		raise argparse.ArgumentTypeError("unknown setting '%s'" % key.strip())
	value = binder.parse_number(raw_value)
	if value is None:
		raise argparse.ArgumentTypeError("setting '%s' needs a number, got '%s'" % (name, raw_value))
	return name, value


#============================================
def _group_list(text):
	"""argparse type for three comma separated substituent labels."""
	labels = [label.strip() for label in text.split(",")]
	if len(labels) != GROUP_COUNT:
		raise argparse.ArgumentTypeError(
			"expected %d comma separated labels, got '%s'" % (GROUP_COUNT, text)
		)
	return labels


#============================================
def _rotation(text):
	value = binder.parse_number(text)
	if value is None:
		raise argparse.ArgumentTypeError("rotation needs a number, got '%s'" % text)
	return value


#============================================
def parse_args(argv=None):
	parser = argparse.ArgumentParser(
		description="Interactive Newman projection viewer"
	)
	parser.add_argument(
		"--width", type=int, default=DEFAULT_WIDTH,
		help="Canvas width in pixels (default: %(default)s)"
	)
	parser.add_argument(
		"--height", type=int, default=DEFAULT_HEIGHT,
		help="Canvas height in pixels (default: %(default)s)"
	)
	parser.add_argument(
		"-r", "--rotation", type=_rotation, default=0.0,
		help="Initial rotation of the front carbon in degrees"
	)
	parser.add_argument(
		"--front", type=_group_list, default=None,
		help="Front carbon groups, e.g. CH3,OH,Br"
	)
	parser.add_argument(
		"--back", type=_group_list, default=None,
		help="Back carbon groups, e.g. H,H,Cl"
	)
	parser.add_argument(
		"-s", "--set", dest="settings", type=_setting_pair, action="append", default=[],
		metavar="KEY=VALUE",
		help="Override one setting, e.g. bond_length=100 (repeatable)"
	)
	parser.add_argument(
		"--log-level", default="WARNING", choices=LOG_LEVELS,
		help="Logging level (default: %(default)s)"
	)
	return parser.parse_args(argv)


#============================================
def apply_args(widget, args):
	"""Push command line choices into a NewmanProjection."""
	if args.settings:
		widget.update_settings(dict(args.settings))
	if args.rotation:
		widget.set_rotation(args.rotation)
	if args.front:
		widget.set_front_groups(args.front)
	if args.back:
		widget.set_back_groups(args.back)
	return widget


#============================================
def main(argv=None):
	"""CLI entry point."""
	args = parse_args(argv)
	logging_config.setup_logging(getattr(logging, args.log_level))
	import tkinter

	root = tkinter.Tk()
	root.title("Newman Projection")
	canvas = tkinter.Canvas(root, width=args.width, height=args.height, background="#fff")
	canvas.grid(row=0, column=0, padx=10, pady=10)
	widget = NewmanProjection(renderer.TkCanvasRenderer(canvas), args.width, args.height)
	apply_args(widget, args)
	panel = binder.TkInputBinder(widget, root)
	panel.frame.grid(row=0, column=1, sticky="n", padx=10, pady=10)
	logger.info("showing %dx%d projection", args.width, args.height)
	root.mainloop()
	return 0
