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

import math

from easypact.errors import InvalidArgumentError


def _check_positive(**kwargs):
    for name, val in kwargs.items():
        if not val > 0:
            raise InvalidArgumentError(f"{name} must be positive, got {val}")


class Pipeline:
    """ Pipeline of arbitrary cross section

        material_id: Id of the pipe material
        length: Pipe length (m)
        area: Flow cross sectional area (m2)
        perimeter: Wetted perimeter (m)

        The effective diameter is the hydraulic diameter, 4 * area / perimeter
    """
    def __init__(self, material_id, length, area, perimeter):
        _check_positive(material_id=material_id, length=length, area=area, perimeter=perimeter)
        self._set_material(material_id)
        self._set_length(length)
        self._area = area
        self._perimeter = perimeter
        self._set_diameter(area, perimeter)

    @property
    def material_id(self):
        return self._material_id

    @property
    def length(self):
        """Pipe length (m)."""
        return self._length

    @property
    def diameter(self):
        """Effective (hydraulic) diameter (m)."""
        return self._diameter

    @property
    def area(self):
        return self._area

    @property
    def perimeter(self):
        return self._perimeter

    def _set_material(self, material_id):
        if not float(material_id).is_integer():
            raise InvalidArgumentError(f"material_id must be an integer, got {material_id}")
        self._material_id = int(material_id)

    def _set_length(self, length):
        self._length = length

    def _set_diameter(self, area, perimeter):
        self._diameter = 4 * area / perimeter


class CircularPipeline(Pipeline):
    """ Round pipe running full

        inner_diameter: Internal diameter (m)
    """
    def __init__(self, material_id, length, inner_diameter):
        _check_positive(inner_diameter=inner_diameter)
        self.inner_diameter = inner_diameter
        super().__init__(material_id, length,
                         area=math.pi * inner_diameter ** 2 / 4,
                         perimeter=math.pi * inner_diameter)

    def _set_diameter(self, area, perimeter):
        # Hydraulic diameter of a full circle is the bore itself
        self._diameter = self.inner_diameter


class RectangularPipeline(Pipeline):
    """ Rectangular duct running full

        width, height: Internal dimensions (m)
    """
    def __init__(self, material_id, length, width, height):
        _check_positive(width=width, height=height)
        self.width = width
        self.height = height
        super().__init__(material_id, length, area=width * height, perimeter=2 * (width + height))
