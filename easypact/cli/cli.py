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

import argparse
import logging
import sys

from tabulate import tabulate

from easypact.constants import P_ATM
from easypact.errors import EasyPactError
from easypact.library import property_library, default_library
from easypact.liquid import Liquid

logger = logging.getLogger(__name__)
_units = {'density': 'kg/m3', 'viscosity': 'mPa.s'}


def _state_table(liq: Liquid) -> str:
    table = [
        ['Density', liq.density, 'kg/m3'],
        ['Dynamic viscosity', liq.visc_dynamic, 'mPa.s'],
        ['Kinematic viscosity', f"{liq.visc_kinematic:.2E}", 'm2/s'],
    ]
    return tabulate(table, headers=['Property', 'Value', 'Units'], disable_numparse=True)

def _print_state(liq: Liquid, name: str):
    print(f"{name} (id {liq.substance_id}) at {liq.temperature} degC, {liq.pressure} Pa")
    print(_state_table(liq))

def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='easypact',
        description='Resolve liquid density and viscosity from tabulated reference data')
    parser.add_argument('--id', type=int, default=1, help='Substance id (default 1, water)')
    parser.add_argument('--temp', type=float, default=0.0, help='Initial temperature, deg C (default 0)')
    parser.add_argument('--pres', type=float, default=P_ATM, help='Pressure, Pa (default 101325)')
    parser.add_argument('--new-temp', type=float, default=10.0, help='Temperature to change to, deg C (default 10)')
    parser.add_argument('--data', default=None, help='Reference data directory or .xlsx workbook')
    parser.add_argument('--vischeck', default='TEMP', choices=['TEMP', 'LEGACY'],
                        help='Range check ahead of the viscosity lookup (default TEMP)')
    parser.add_argument('--table', action='store_true', help='Print the reference table for the substance and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser

def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        lib = property_library(args.data) if args.data else default_library()
        name = lib.name(args.id)
        if args.table:
            print(f"{name} (id {args.id})")
            df = lib.table(args.id)
            print(tabulate(df, headers=['temp_c'] + [f"{col} {_units[col]}" for col in df.columns]))
            return 0
        liq = Liquid(args.id, args.temp, args.pres, library=lib, vischeck=args.vischeck)
        _print_state(liq, name)
        print(f"\nChanging temperature to {args.new_temp} degC\n")
        liq.set_temperature(args.new_temp)
        _print_state(liq, name)
    except (EasyPactError, ValueError, OSError) as e:
        logger.debug("Calculation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
