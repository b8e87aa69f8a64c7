"""
ROARK TABLE 8.1 CASE TABLE
==========================

Tabulates the end values (reaction, moment, slope, deflection at A and B) of
all ten valid restraint pairs for a single point load, and optionally the
full section table for one pair.

Usage:
    python demos/run_roark_cases.py
    python demos/run_roark_cases.py --P 1 --a 120 --L 240 --code free-fixed
    python demos/run_roark_cases.py --code 14 --sections 7 --csv artifacts/fixed_free.csv
"""

import argparse
import os

import pandas as pd

from roark_beam import (
    VALID_CODES,
    BeamSpec,
    PointLoad,
    SimpleBeam,
    resolve_boundary_conditions,
    resolve_far_end,
)
from roark_beam.config import CONFIG


def case_table(beam: BeamSpec, load: PointLoad) -> pd.DataFrame:
    rows = []
    for code in VALID_CODES:
        bc = resolve_boundary_conditions(code, load.P, beam.E, beam.I, beam.L, load.a)
        far = resolve_far_end(code, load.P, beam.E, beam.I, beam.L, load.a)
        rows.append({
            'code': int(code),
            'restraints': str(code),
            'roark': code.roark_case or 'mirrored',
            'Ra': bc.Ra,
            'Ma': bc.Ma,
            'theta_a': bc.theta_a,
            'y_a': bc.y_a,
            'Rb': far.R,
            'Mb': far.M,
            'theta_b': far.theta,
            'y_b': far.y,
        })
    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(
        description='Tabulate Roark Table 8.1 point-load cases',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Restraint codes (A end first): 1 = Fixed, 2 = Simple, 3 = Guided, 4 = Free
Valid: 11 12 13 14 21 22 23 31 32 41, or names such as "guided-fixed".
        """
    )
    parser.add_argument('--E', type=float, default=29000.0, help='Elastic modulus (default: 29000)')
    parser.add_argument('--I', type=float, default=100.0, help='Second moment of area (default: 100)')
    parser.add_argument('--L', type=float, default=240.0, help='Beam length (default: 240)')
    parser.add_argument('--P', type=float, default=1.0, help='Load, positive downward (default: 1)')
    parser.add_argument('--a', type=float, default=120.0, help='Load location from end A (default: 120)')
    parser.add_argument('--code', type=str, default=None,
                        help='Also print the section table for this restraint pair')
    parser.add_argument('--sections', type=int, default=CONFIG.default_number_of_sections,
                        help=f'Sections for the section table (default: {CONFIG.default_number_of_sections})')
    parser.add_argument('--csv', type=str, default=None, help='Write the section table to CSV')
    args = parser.parse_args()

    try:
        beam = BeamSpec(E=args.E, I=args.I, L=args.L)
        load = PointLoad(P=args.P, a=args.a)
        load.check_location(beam.L)
        table = case_table(beam, load)
    except ValueError as e:
        parser.error(str(e))

    fmt = lambda v: f"{v:.{CONFIG.display_precision}g}"

    print("=" * 70)
    print("ROARK TABLE 8.1 - POINT LOAD CASES")
    print("=" * 70)
    print(f"E = {beam.E}, I = {beam.I}, L = {beam.L}, P = {load.P}, a = {load.a}")
    print()
    print(table.to_string(index=False, float_format=fmt))

    if args.code is None:
        return

    try:
        simple_beam = SimpleBeam(beam.E, beam.I, beam.L, [load], code=args.code,
                                 number_of_sections=args.sections)
    except ValueError as e:
        parser.error(str(e))

    print()
    print(f"Section table: {simple_beam.code} (code {int(simple_beam.code)})")
    print("-" * 70)
    df = simple_beam.to_dataframe()
    print(df.to_string(index=False, float_format=fmt))

    if args.csv:
        os.makedirs(os.path.dirname(args.csv) if os.path.dirname(args.csv) else '.', exist_ok=True)
        df.to_csv(args.csv, index=False)
        print(f"\nSaved {len(df)} sections to {args.csv}")


if __name__ == "__main__":
    main()
