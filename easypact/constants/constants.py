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

# Constants
ABS_ZERO_C = -273.15  # Absolute zero (deg C)
P_ATM = 101325.0  # Standard atmosphere (Pa)
MPAS2PAS = 0.001  # mPa.s to Pa.s
