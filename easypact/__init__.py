"""
easypact
===================================

-----------------------------------------------------------------
Liquid property and pipeline utilities for process calculations
-----------------------------------------------------------------

Resolves temperature dependent liquid properties from tabulated reference data, by linear interpolation
between the nearest tabulated temperatures. Extrapolation outside the tabulated range is refused.

Note: Functions live in separate modules, requiring seperate imports

Includes;

- Density and dynamic viscosity tables by substance id (water and ethanol bundled), with range and bracket lookup
- Liquid state objects that keep density, dynamic and kinematic viscosity consistent with temperature
- Hydraulic diameter of circular, rectangular and arbitrary pipe cross sections
- A command line driver, 'easypact'


"""

submodules = [
    'classes',
    'cli',
    'constants',
    'errors',
    'library',
    'liquid',
    'pipeline',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'easypact.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'easypact' has no attribute '{name}'"
            )
