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

import numpy as np

def interpolate(point1, point2, x):
    """ Returns y at x on the straight line through point1 = (x1, y1) and point2 = (x2, y2)
        No bounds checking is done, x outside [x1, x2] extrapolates. x1 must not equal x2
    """
    x1, y1 = point1
    x2, y2 = point2
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)

def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data
    else:
        return np.atleast_1d(input_data)

def process_input(input_data):
    # Single element arrays and lists collapse to a scalar, larger ones become arrays
    if isinstance(input_data, np.ndarray):
        if input_data.size == 1:
            return input_data.item()
        else:
            return input_data
    elif isinstance(input_data, (list, tuple)):
        if len(input_data) == 1:
            return input_data[0]
        else:
            return np.array(input_data)
    else:
        return input_data
