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

"""Logging setup for the newman package."""

# Standard Library
import logging
import sys


#============================================
def setup_logging(level=logging.INFO, log_file=None):
	"""Configure the 'newman' logger.

	Args:
		level: logging level such as logging.DEBUG.
		log_file: optional path that receives a copy of the log.
	"""
	logger = logging.getLogger("newman")
	logger.setLevel(level)
	# avoid duplicate lines when called twice
	if logger.hasHandlers():
		logger.handlers.clear()
	formatter = logging.Formatter(
		"%(asctime)s - %(name)s - %(levelname)s - %(message)s",
		datefmt="%H:%M:%S",
	)
	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)
	if log_file:
		file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)
	return logger
