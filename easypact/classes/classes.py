#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    easypact - Liquid property and pipeline utilities for process calculations
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

from enum import Enum

class prop_kind(Enum):  # Tabulated property versus temperature
    DENSITY = 0
    VISCOSITY = 1

class visc_check(Enum):  # Range check applied ahead of viscosity lookup
    TEMP = 0
    LEGACY = 1

class_dic = {
    "propkind": prop_kind,
    "vischeck": visc_check,
}
