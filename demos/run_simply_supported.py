import argparse

import matplotlib.pyplot as plt

from roark_beam import SimpleBeam
from roark_beam.config import CONFIG
from roark_beam.viz import plot_beam_diagrams


def main():
    """
    SIMPLY SUPPORTED BEAM, SINGLE POINT LOAD
    ========================================
    A 360 in. steel beam (E = 29000 ksi, I = 100 in⁴) on two simple supports
    with a 1 kip load at midspan. Prints the section table and draws the
    diagrams.

    Usage:
        python demos/run_simply_supported.py
        python demos/run_simply_supported.py --sections 13 --save artifacts/simple.png
    """
    parser = argparse.ArgumentParser(description='Simply supported beam with a midspan point load')
    parser.add_argument('--sections', type=int, default=CONFIG.default_number_of_sections,
                        help=f'Number of analysis sections (default: {CONFIG.default_number_of_sections})')
    parser.add_argument('--save', type=str, default=None,
                        help='Save the diagrams to this file instead of showing them')
    args = parser.parse_args()

    E = 29000.0  # ksi
    I = 100.0    # in^4
    L = 360.0    # in
    P = 1.0      # kip, downward
    a = 180.0    # in

    beam = SimpleBeam(E, I, L, [(P, a)], code="simple-simple")
    try:
        beam.number_of_sections = args.sections
    except ValueError as e:
        parser.error(str(e))

    beam.print_to_console()
    print()

    # ========================================================================
    # SECTION TABLE
    # ========================================================================
    print("Section results")
    print("=" * 70)
    print(beam.to_dataframe().to_string(index=False, float_format=lambda v: f"{v:.{CONFIG.display_precision}g}"))
    print()

    reactions = beam.reactions()
    print(f"Left reaction:  {reactions['A']['R']:.4f} kip")
    print(f"Right reaction: {reactions['B']['R']:.4f} kip")
    print()
    print("Expected (from textbook):")
    print(f"Reactions: {P / 2:.4f} kip each")
    print(f"Max moment: {P * L / 4:.4f} kip-in")
    print(f"Max deflection: {-P * L**3 / (48 * E * I):.6f} in")

    plot_beam_diagrams(beam, outpath=args.save, title="Simply Supported Beam - Midspan Point Load")
    if args.save is None:
        plt.show()
    else:
        print(f"\nDiagrams saved to {args.save}")


if __name__ == "__main__":
    main()
