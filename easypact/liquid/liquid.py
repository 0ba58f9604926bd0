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

import logging

from easypact.classes import prop_kind, visc_check
from easypact.validate import validate_methods
from easypact.constants import ABS_ZERO_C, MPAS2PAS
from easypact.errors import InvalidArgumentError, OutOfRangeError
from easypact.library import ExactMatch, default_library
from easypact.shared_fns import interpolate

logger = logging.getLogger(__name__)


class Liquid():
    """ Temperature dependent physical properties of a liquid, resolved from tabulated reference data
        by linear interpolation between the nearest tabulated temperatures

            Inputs:
                substance_id: Positive integer id of the liquid in the property tables
                temp: Temperature (deg C). Must be above absolute zero
                pres: Pressure (Pa). Must be positive
                library: property_library to resolve properties from (default bundled reference data)
                vischeck: A string or visc_check Enum class selecting the range check made ahead of the viscosity lookup;
                       TEMP: Checks temperature against the viscosity table (default)
                       LEGACY: Checks the previous dynamic viscosity value against the viscosity table temperature range.
                               Kept for compatibility, the temperature is still checked by the lookup itself

            Returns object with following properties:
                .temperature   : Temperature (deg C)
                .pressure      : Pressure (Pa)
                .density       : Density (kg/m3)
                .visc_dynamic  : Dynamic viscosity (mPa.s)
                .visc_kinematic: Kinematic viscosity (m2/s)

            Usage example for water at 0 deg C and 1 atm:
                liq = liquid.Liquid(1, 0, 101325)
                liq.density
                >> 999.8
                liq.set_temperature(5)
                liq.density
                >> 999.75
    """
    def __init__(self, substance_id: int, temp: float, pres: float, library=None, vischeck='TEMP'):
        if not substance_id > 0 or not float(substance_id).is_integer():
            raise InvalidArgumentError(f"Substance id must be a positive integer, got {substance_id}")
        if not temp > ABS_ZERO_C:
            raise InvalidArgumentError("Temperature must be above absolute zero")
        if not pres > 0:
            raise InvalidArgumentError("Pressure must be positive")
        self._id = int(substance_id)
        self._library = library if library is not None else default_library()
        self._vischeck = validate_methods(['vischeck'], [vischeck])
        self._temperature = None
        self._pressure = None
        self._density = None
        self._visc_dynamic = 0.0
        self._visc_kinematic = None
        self._set_pressure(pres)
        self.set_temperature(temp)

    @property
    def substance_id(self):
        return self._id

    @property
    def temperature(self):
        """Temperature (deg C)."""
        return self._temperature

    @property
    def pressure(self):
        """Pressure (Pa)."""
        return self._pressure

    @property
    def density(self):
        """Density at the current temperature (kg/m3)."""
        return self._density

    @property
    def visc_dynamic(self):
        """Dynamic viscosity at the current temperature (mPa.s)."""
        return self._visc_dynamic

    @property
    def visc_kinematic(self):
        """Kinematic viscosity at the current temperature (m2/s)."""
        return self._visc_kinematic

    def set_temperature(self, temp: float):
        """ Changes temperature (deg C) and recomputes density, then viscosity.
            Raises OutOfRangeError if temp lies outside either property table. State is unchanged on failure
        """
        density = self._resolve(prop_kind.DENSITY, temp)

        if self._vischeck == visc_check.LEGACY:
            if not self._library.in_range(self._id, prop_kind.VISCOSITY, self._visc_dynamic):
                tmin, tmax = self._library.range_of(self._id, prop_kind.VISCOSITY)
                raise OutOfRangeError(self._visc_dynamic, tmin, tmax, what='Dynamic viscosity')
        visc_dynamic = self._resolve(prop_kind.VISCOSITY, temp)
        visc_kinematic = visc_dynamic * MPAS2PAS / density

        self._temperature = temp
        self._density = density
        self._visc_dynamic = visc_dynamic
        self._visc_kinematic = visc_kinematic
        logger.debug("Substance %d at %s degC: density %s kg/m3, viscosity %s mPa.s",
                     self._id, temp, density, visc_dynamic)

    def _set_pressure(self, pres: float):
        self._pressure = pres

    def _resolve(self, kind, temp):
        # Tabulated value on an exact hit, else straight line between the bracketing points
        res = self._library.lookup(self._id, kind, temp)
        if isinstance(res, ExactMatch):
            return res.value
        return interpolate(res.lo, res.hi, temp)

    def props(self) -> dict:
        return {
            'substance_id': self._id,
            'temperature': self._temperature,
            'pressure': self._pressure,
            'density': self._density,
            'visc_dynamic': self._visc_dynamic,
            'visc_kinematic': self._visc_kinematic,
        }

    def __repr__(self):
        return (f"Liquid(substance_id={self._id}, temp={self._temperature}, pres={self._pressure}, "
                f"density={self._density}, visc_dynamic={self._visc_dynamic})")
