#!/usr/bin/env python3
"""
Tests for the easypact command line driver.
"""

import sys
import os
import io
import tempfile
from contextlib import redirect_stdout, redirect_stderr

import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from easypact.cli import main

def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()

def test_cli_defaults():
    """Water at 0 degC then 10 degC"""
    code, out, err = _run([])
    assert code == 0, f"Exit code {code}: {err}"
    assert 'Water (id 1) at 0.0 degC, 101325.0 Pa' in out
    assert '999.8' in out
    assert '1.792' in out
    assert '1.79E-06' in out
    assert 'Changing temperature to 10.0 degC' in out
    assert '999.7' in out
    assert '1.31E-06' in out

def test_cli_custom_state():
    code, out, err = _run(['--id', '2', '--temp', '20', '--new-temp', '30', '--pres', '200000'])
    assert code == 0, f"Exit code {code}: {err}"
    assert 'Ethanol (id 2) at 20.0 degC, 200000.0 Pa' in out
    assert '789.5' in out
    assert '781.0' in out

def test_cli_out_of_range():
    code, out, err = _run(['--new-temp', '150'])
    assert code == 1
    assert err.startswith('Error: ')
    assert 'outside the tabulated range' in err

def test_cli_invalid_temperature():
    code, out, err = _run(['--temp', '-300'])
    assert code == 1
    assert 'absolute zero' in err
    assert out == ''

def test_cli_unknown_substance():
    code, out, err = _run(['--id', '42'])
    assert code == 1
    assert '42' in err

def test_cli_table():
    code, out, err = _run(['--table'])
    assert code == 0
    assert out.startswith('Water (id 1)')
    assert 'density kg/m3' in out
    assert '958.4' in out

def test_cli_table_single_property():
    """Headers follow the tables present, substance 8 has density only"""
    with tempfile.TemporaryDirectory() as folder:
        for stem, rows in (('density', [[8, 0, 1030.0], [8, 20, 1025.0]]),
                           ('viscosity', [[5, 0, 12.1], [5, 20, 1.41]])):
            pd.DataFrame(rows, columns=['substance_id', 'temp_c', 'value']).to_csv(
                os.path.join(folder, stem + '.csv'), index=False)
        code, out, err = _run(['--data', folder, '--id', '8', '--table'])
    assert code == 0, f"Exit code {code}: {err}"
    assert 'density kg/m3' in out
    assert 'viscosity' not in out
    assert '1025' in out

def test_cli_data_directory():
    with tempfile.TemporaryDirectory() as folder:
        for stem, rows in (('density', [[5, 0, 1260.0], [5, 20, 1261.0]]),
                           ('viscosity', [[5, 0, 12.1], [5, 20, 1.41]])):
            pd.DataFrame(rows, columns=['substance_id', 'temp_c', 'value']).to_csv(
                os.path.join(folder, stem + '.csv'), index=False)
        code, out, err = _run(['--data', folder, '--id', '5', '--new-temp', '20'])
    assert code == 0, f"Exit code {code}: {err}"
    assert 'Substance 5 (id 5)' in out
    assert '1261.0' in out

def test_cli_missing_data_directory_file():
    with tempfile.TemporaryDirectory() as folder:
        code, out, err = _run(['--data', folder])
    assert code == 1
    assert err.startswith('Error: ')


if __name__ == '__main__':
    print("=" * 70)
    print("CLI TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
