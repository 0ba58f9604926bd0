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
import os
from functools import lru_cache
from importlib import resources
from typing import NamedTuple

import numpy as np
import pandas as pd

from easypact.classes import prop_kind
from easypact.validate import validate_methods
from easypact.errors import UnknownSubstanceError, OutOfRangeError
from easypact.shared_fns import interpolate, convert_to_numpy, process_input

logger = logging.getLogger(__name__)

DATA_ENV = 'EASYPACT_DATA'  # Alternate reference data directory or .xlsx workbook
DATA_COLS = ['substance_id', 'temp_c', 'value']
NAME_COLS = ['substance_id', 'name']
_sources = {prop_kind.DENSITY: 'density', prop_kind.VISCOSITY: 'viscosity'}


class Point(NamedTuple):  # Tabulated (temperature, value) pair
    temp: float
    value: float

class ExactMatch(NamedTuple):  # Query temperature coincides with a tabulated point
    value: float

class Bracket(NamedTuple):  # Tabulated points either side of the query temperature
    lo: Point
    hi: Point


def _tables_from_frame(df: pd.DataFrame, source: str) -> dict:
    """ Splits a long format substance_id / temp_c / value frame into per substance
        tuples of Points, ascending in temperature
    """
    missing = [c for c in DATA_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"{source}: missing column(s) {', '.join(missing)}")
    df = df[DATA_COLS].dropna()
    tables = {}
    for sid, grp in df.groupby('substance_id', sort=True):
        grp = grp.sort_values('temp_c', kind='stable')
        if grp['temp_c'].duplicated().any():
            raise ValueError(f"{source}: duplicate temperatures for substance {int(sid)}")
        tables[int(sid)] = tuple(Point(float(t), float(v)) for t, v in zip(grp['temp_c'], grp['value']))
    return tables

def _names_from_frame(df: pd.DataFrame) -> dict:
    if df is None:
        return {}
    missing = [c for c in NAME_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"substances: missing column(s) {', '.join(missing)}")
    return {int(sid): str(name) for sid, name in zip(df['substance_id'], df['name'])}


class property_library:
    """ Read-only store of temperature dependent property tables, keyed by substance id

        path: Directory holding density.csv, viscosity.csv and optionally substances.csv,
              or an .xlsx workbook with 'density', 'viscosity' and optionally 'substances' sheets.
              Defaults to the EASYPACT_DATA environment variable, then to the bundled data

        Usage example:
            lib = property_library()
            lib.range_of(1, 'DENSITY')
            >> (0.0, 100.0)
            lib.lookup(1, 'DENSITY', 5)
            >> Bracket(lo=Point(temp=0.0, value=999.8), hi=Point(temp=10.0, value=999.7))
    """
    def __init__(self, path=None):
        if path is None:
            path = os.environ.get(DATA_ENV)
        if path is None:
            frames, names = self._read_bundled()
            self.source = 'bundled'
        elif os.path.isdir(path):
            frames, names = self._read_csv_dir(path)
            self.source = path
        elif str(path).lower().endswith('.xlsx'):
            frames, names = self._read_workbook(path)
            self.source = path
        else:
            raise ValueError(f"Reference data path must be a directory or an .xlsx workbook: {path}")
        tables = {kind: _tables_from_frame(frames[kind], f"{self.source}:{_sources[kind]}") for kind in prop_kind}
        self._store(tables, _names_from_frame(names))
        logger.info("Loaded property tables from %s (%d density, %d viscosity substances)",
                    self.source, len(tables[prop_kind.DENSITY]), len(tables[prop_kind.VISCOSITY]))

    @classmethod
    def from_points(cls, density=None, viscosity=None, names=None):
        """ Builds a store from in-memory tables
            density, viscosity: dict of {substance_id: [(temp, value), ...]}, ascending in temperature.
                                Taken as given, not re-sorted
            names: Optional dict of {substance_id: display name}
        """
        lib = cls.__new__(cls)
        lib.source = 'memory'
        tables = {}
        for kind, data in ((prop_kind.DENSITY, density), (prop_kind.VISCOSITY, viscosity)):
            tables[kind] = {}
            for sid, pts in (data or {}).items():
                if len(pts) == 0:
                    raise ValueError(f"{_sources[kind]} table for substance {sid} has no points")
                tables[kind][int(sid)] = tuple(Point(float(t), float(v)) for t, v in pts)
        lib._store(tables, dict(names or {}))
        return lib

    @staticmethod
    def _read_bundled():
        data = resources.files(__package__).joinpath('data')
        frames = {}
        for kind, stem in _sources.items():
            with data.joinpath(stem + '.csv').open('r', encoding='utf-8') as f:
                frames[kind] = pd.read_csv(f)
        with data.joinpath('substances.csv').open('r', encoding='utf-8') as f:
            names = pd.read_csv(f)
        return frames, names

    @staticmethod
    def _read_csv_dir(path):
        frames = {kind: pd.read_csv(os.path.join(path, stem + '.csv')) for kind, stem in _sources.items()}
        names_file = os.path.join(path, 'substances.csv')
        names = pd.read_csv(names_file) if os.path.exists(names_file) else None
        return frames, names

    @staticmethod
    def _read_workbook(path):
        sheets = pd.read_excel(path, sheet_name=None, engine="openpyxl")
        missing = [stem for stem in _sources.values() if stem not in sheets]
        if missing:
            raise ValueError(f"{path}: missing sheet(s) {', '.join(missing)}")
        frames = {kind: sheets[stem] for kind, stem in _sources.items()}
        return frames, sheets.get('substances')

    def _store(self, tables, names):
        self._tables = tables
        self._temps = {kind: {sid: np.array([p.temp for p in pts]) for sid, pts in tables[kind].items()}
                       for kind in prop_kind}
        self._names = names

    def points(self, substance_id: int, kind) -> tuple:
        """ Returns the tabulated Points for a substance and property kind, ascending in temperature """
        kind = validate_methods(['propkind'], [kind])
        try:
            return self._tables[kind][substance_id]
        except KeyError:
            raise UnknownSubstanceError(
                f"No {_sources[kind]} data for substance {substance_id}") from None

    def range_of(self, substance_id: int, kind) -> tuple:
        """ Returns (min, max) tabulated temperature (deg C) """
        pts = self.points(substance_id, kind)
        return pts[0].temp, pts[-1].temp

    def in_range(self, substance_id: int, kind, x: float) -> bool:
        tmin, tmax = self.range_of(substance_id, kind)
        return tmin <= x <= tmax

    def lookup(self, substance_id: int, kind, temp: float):
        """ Resolves a temperature against a property table
            Returns ExactMatch(value) if temp equals a tabulated temperature,
            otherwise Bracket(lo, hi) with the last point below and first point above temp.
            Raises OutOfRangeError if temp is outside the tabulated range
        """
        kind = validate_methods(['propkind'], [kind])
        pts = self.points(substance_id, kind)
        tmin, tmax = pts[0].temp, pts[-1].temp
        if not tmin <= temp <= tmax:
            raise OutOfRangeError(temp, tmin, tmax)
        i = int(np.searchsorted(self._temps[kind][substance_id], temp, side='right')) - 1
        if pts[i].temp == temp:
            return ExactMatch(pts[i].value)
        return Bracket(pts[i], pts[i + 1])

    def evaluate(self, substance_id: int, kind, temps):
        """ Returns the property at one or more temperatures (deg C), tabulated value on an exact hit
            and linear interpolation between bracketing points otherwise. Single value in, single value out
            Raises OutOfRangeError if any temperature is outside the tabulated range
        """
        results = []
        for t in convert_to_numpy(temps):
            res = self.lookup(substance_id, kind, float(t))
            if isinstance(res, ExactMatch):
                results.append(res.value)
            else:
                results.append(interpolate(res.lo, res.hi, float(t)))
        return process_input(np.array(results))

    def substances(self, kind=None) -> list:
        """ Returns sorted substance ids with a table for kind, or with any table if kind is None """
        if kind is None:
            ids = set()
            for tables in self._tables.values():
                ids.update(tables)
            return sorted(ids)
        kind = validate_methods(['propkind'], [kind])
        return sorted(self._tables[kind])

    def name(self, substance_id: int) -> str:
        return self._names.get(substance_id, f"Substance {substance_id}")

    def table(self, substance_id: int) -> pd.DataFrame:
        """ Returns a DataFrame of all tabulated properties for a substance, indexed by temperature.
            NaN where a property has no point at that temperature
        """
        cols = []
        for kind, stem in _sources.items():
            pts = self._tables[kind].get(substance_id)
            if pts:
                cols.append(pd.Series([p.value for p in pts], index=[p.temp for p in pts], name=stem))
        if not cols:
            raise UnknownSubstanceError(f"No data for substance {substance_id}")
        df = pd.concat(cols, axis=1).sort_index()
        df.index.name = 'temp_c'
        return df


@lru_cache(maxsize=None)
def default_library() -> property_library:
    """ Process wide store, loaded once on first use """
    return property_library()
