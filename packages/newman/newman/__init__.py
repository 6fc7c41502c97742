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

"""Layout and drawing of interactive Newman projections."""

from .config import NewmanConfig
from .config import NewmanSettings
from .layout import DiagramPlan
from .layout import compute_plan
from .renderer import draw_plan
from .widget import NewmanProjection

__version__ = "0.1.0"

__all__ = [
	"DiagramPlan",
	"NewmanConfig",
	"NewmanProjection",
	"NewmanSettings",
	"compute_plan",
	"draw_plan",
]
