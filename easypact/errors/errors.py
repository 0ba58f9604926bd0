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


class EasyPactError(Exception):
    """ Base class for all errors raised by easypact """


class InvalidArgumentError(EasyPactError, ValueError):
    """ An input violates a physical constraint (non-positive id, temperature at or
        below absolute zero, non-positive pressure, non-positive pipe dimension)
    """


class UnknownSubstanceError(EasyPactError, KeyError):
    """ No reference table exists for the requested substance """

    def __str__(self):
        # KeyError quotes its argument by default
        return str(self.args[0]) if self.args else ''


class OutOfRangeError(EasyPactError, ValueError):
    """ Requested value lies outside the tabulated interval. Interpolation is
        refused rather than extrapolated.

        value: The value that was checked
        tmin, tmax: Tabulated temperature interval (deg C)
    """

    def __init__(self, value, tmin, tmax, what='Temperature'):
        self.value = value
        self.tmin = tmin
        self.tmax = tmax
        super().__init__(
            f"{what} {value} is outside the tabulated range [{tmin}, {tmax}]. "
            "Interpolation is not possible without reference data around this point"
        )
