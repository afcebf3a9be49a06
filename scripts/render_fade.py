#!/usr/bin/env python3
"""Bake a volume fade into an audio file.

Renders the gain envelope a VolumeFader would apply and writes the faded
audio, which is handy to audition scales and durations offline.

Usage:
    python render_fade.py input.wav -o faded.wav --to 0
    python render_fade.py input.wav -o faded.wav --from 0 --to 1 --duration 3000 --curve linear
    python render_fade.py input.wav -o faded.wav --to 0 --start 5000 --range 40
"""

import argparse
import logging
import sys
from pathlib import Path

import soundfile as sf

from volume_fader import FadeCurve, FadeRecord, InvalidArgument, apply_fade, make_scale
from volume_fader.core.constants import DEFAULT_DYNAMIC_RANGE, DEFAULT_FADE_DURATION

logger = logging.getLogger(__name__)


def render_fade(
    input_path: str | Path,
    output_path: str | Path,
    start_level: float = 1.0,
    end_level: float = 0.0,
    start: float = 0.0,
    duration: float = DEFAULT_FADE_DURATION,
    curve: str = "decibel",
    dynamic_range: float = DEFAULT_DYNAMIC_RANGE,
) -> dict:
    """Apply one fade to an audio file.

    Args:
        input_path: Source audio file
        output_path: Destination audio file
        start_level: Fade-domain level before the fade (0.0-1.0)
        end_level: Fade-domain level after the fade (0.0-1.0)
        start: Fade start position in milliseconds
        duration: Fade duration in milliseconds
        curve: FadeCurve name
        dynamic_range: Range in dB of the decibel curve

    Returns:
        Dictionary describing the rendered file
    """
    logger.info(f"Loading: {input_path}")
    audio, sample_rate = sf.read(input_path, dtype="float32")

    scale = make_scale(curve, dynamic_range)
    record = FadeRecord.create(start_level, end_level, start, duration)
    logger.debug(f"Rendering {record} with {scale!r}")

    result = apply_fade(audio, record, scale, sample_rate)

    logger.info(f"Writing: {output_path}")
    sf.write(output_path, result, sample_rate)

    return {
        "input_file": str(input_path),
        "output_file": str(output_path),
        "sample_rate": sample_rate,
        "duration": len(result) / sample_rate,
        "scale": repr(scale),
        "start_gain": scale(start_level),
        "end_gain": scale(end_level),
    }


def main():
    """Main entry point for the fade renderer script."""
    parser = argparse.ArgumentParser(
        description="Bake a volume fade into an audio file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s input.wav -o out.wav --to 0
      Fade out over 500 ms from the beginning of the file

  %(prog)s input.wav -o out.wav --from 0 --to 1 --duration 3000 --curve scurve
      Three second s-curve fade in
        """,
    )

    parser.add_argument("input", type=str, help="Input audio file")
    parser.add_argument("-o", "--output", type=str, required=True, help="Output audio file")
    parser.add_argument("--from", dest="start_level", type=float, default=1.0, help="Level before the fade (default: 1)")
    parser.add_argument("--to", dest="end_level", type=float, default=0.0, help="Level after the fade (default: 0)")
    parser.add_argument("--start", type=float, default=0.0, help="Fade start in milliseconds (default: 0)")
    parser.add_argument(
        "--duration",
        type=float,
        default=DEFAULT_FADE_DURATION,
        help=f"Fade duration in milliseconds (default: {DEFAULT_FADE_DURATION:g})",
    )
    parser.add_argument(
        "--curve",
        type=str,
        choices=[curve.name.lower() for curve in FadeCurve if curve.name != "DEFAULT"],
        default="decibel",
        help="Scale curve (default: decibel)",
    )
    parser.add_argument(
        "--range",
        dest="dynamic_range",
        type=float,
        default=DEFAULT_DYNAMIC_RANGE,
        help=f"Dynamic range of the decibel curve in dB (default: {DEFAULT_DYNAMIC_RANGE:g})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not Path(args.input).exists():
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)

    try:
        result = render_fade(
            input_path=args.input,
            output_path=args.output,
            start_level=args.start_level,
            end_level=args.end_level,
            start=args.start,
            duration=args.duration,
            curve=args.curve,
            dynamic_range=args.dynamic_range,
        )
    except InvalidArgument as e:
        logger.error(f"Invalid fade: {e}")
        sys.exit(2)

    print("\n=== Fade Rendered ===")
    print(f"Input:  {result['input_file']}")
    print(f"Output: {result['output_file']} ({result['duration']:.2f}s, {result['sample_rate']}Hz)")
    print(f"Scale:  {result['scale']}")
    print(f"Gain:   {result['start_gain']:.4f} -> {result['end_gain']:.4f}")


if __name__ == "__main__":
    main()
