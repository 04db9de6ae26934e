"""
SINGLE BEAM ANALYSIS DEMO
=========================

PURPOSE:
--------
Analyze one beam from the command line and print the same numbers the
results panel shows: peak deflection, extreme-fiber stress, slope, moment
and shear. Optionally write the sampled curves to CSV.

Anything not given on the command line takes the engine defaults
(2 m steel beam, 100 x 150 mm section, 10 kN at midspan).
"""

import argparse
import os
from pathlib import Path

from beamcalc import analyze, InvalidConfiguration
from beamcalc.config import BeamInputs, build_configuration
from beamcalc.model import BeamType, LoadType
from beamcalc.post import format_summary, results_table, summarize


def main():
    parser = argparse.ArgumentParser(
        description='Closed-form analysis of a single-span beam',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_beam.py
  python demos/run_beam.py --beam cantilever --load distributed --q 2000
  python demos/run_beam.py --beam fixed-fixed --P 5000 --a 0.5 --csv artifacts/beam.csv
        """
    )
    parser.add_argument('--beam', choices=[t.value for t in BeamType], default=None,
                        help='Support condition (default: simply-supported)')
    parser.add_argument('--load', choices=[t.value for t in LoadType], default=None,
                        help='Load type (default: point)')
    parser.add_argument('--material', default=None,
                        help='steel, aluminum, copper, wood or custom (default: steel)')
    parser.add_argument('--E-gpa', dest='custom_E_gpa', type=float, default=None,
                        help="Young's modulus in GPa, used with --material custom")
    parser.add_argument('--length', type=float, default=None, help='Span in m (default: 2.0)')
    parser.add_argument('--width', type=float, default=None, help='Section width in m (default: 0.1)')
    parser.add_argument('--height', type=float, default=None, help='Section height in m (default: 0.15)')
    parser.add_argument('--P', type=float, default=None, help='Point load in N (default: 10000)')
    parser.add_argument('--q', type=float, default=None, help='UDL in N/m (default: 5000)')
    parser.add_argument('--M0', type=float, default=None, help='Applied moment in N·m (default: 5000)')
    parser.add_argument('--a', type=float, default=None, help='Load position in m (default: L/2)')
    parser.add_argument('--n', type=int, default=None, help='Sample intervals (default: 100)')
    parser.add_argument('--csv', default=None, help='Write sampled curves to this CSV file')
    args = parser.parse_args()

    inputs = BeamInputs(
        beam_type=args.beam,
        load_type=args.load,
        material=args.material,
        custom_E_gpa=args.custom_E_gpa,
        length=args.length,
        width=args.width,
        height=args.height,
        point_load=args.P,
        distributed_load=args.q,
        moment_load=args.M0,
        load_position=args.a,
        num_points=args.n,
    )

    try:
        config, section = build_configuration(inputs)
        result = analyze(config)
    except InvalidConfiguration as e:
        parser.error(str(e))

    print("=" * 70)
    print(f"{config.beam_type.upper()} BEAM, {config.load_type.upper()} LOAD")
    print("=" * 70)
    print(f"  L = {config.L} m, b x h = {section.b} x {section.h} m, E = {config.E / 1e9:.0f} GPa")
    print(f"  EI = {result.EI:.4e} N·m², load position a = {config.load_position:.3f} m")
    print()

    display = format_summary(summarize(result, section))
    for key, text in display.items():
        print(f"  {key:<18} {text}")

    if args.csv:
        path = Path(args.csv)
        os.makedirs(path.parent or Path("."), exist_ok=True)
        results_table(result).to_csv(path, index=False)
        print()
        print(f"✓ Saved: {path}")


if __name__ == "__main__":
    main()
