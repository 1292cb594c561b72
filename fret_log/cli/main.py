"""Main entry point for the Fret Log CLI."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..audio.sample_extractor import SoundFileSampleExtractor
from ..audio.tone_generator import DEFAULT_SAMPLE_RATE, render_scale, write_wav
from ..core.config import ConfigManager, ValidationConfig
from ..core.errors import ValidationError
from ..logger import get_logger
from ..logging_config import setup_logging
from ..scales import SCALES, get_scale
from ..services.scale_validator import ScaleValidator

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _add_note_source(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--scale", type=str, help="Name of a built-in scale")
    source.add_argument(
        "--notes", type=str, help="Comma-separated notes, e.g. C4,D4,E4"
    )


def _expected_notes(args: argparse.Namespace) -> List[str]:
    if args.scale:
        return list(get_scale(args.scale).notes)
    return [note.strip() for note in args.notes.split(",") if note.strip()]


def _build_config(args: argparse.Namespace) -> ValidationConfig:
    if args.config_profile:
        config = ConfigManager(args.config_dir).get_config(args.config_profile)
    else:
        config = ValidationConfig()

    overrides = {
        "confidence_threshold": args.confidence_threshold,
        "minimum_note_duration": args.min_duration,
        "passing_accuracy": args.passing_accuracy,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return config.with_overrides(**overrides)


def run_scales(args: argparse.Namespace) -> int:
    for scale in SCALES:
        print(f"{scale.name:<20} {' '.join(scale.notes)}")
    return EXIT_VALID


def run_validate(args: argparse.Namespace) -> int:
    audio_path = Path(args.audio)
    try:
        expected = _expected_notes(args)
        config = _build_config(args)
    except (KeyError, ValueError) as e:
        logger.error(f"Invalid arguments: {e}")
        return EXIT_ERROR

    try:
        audio_data = audio_path.read_bytes()
    except OSError as e:
        logger.error(f"Could not read {audio_path}: {e}")
        return EXIT_ERROR

    validator = ScaleValidator(
        config,
        sample_extractor=SoundFileSampleExtractor(suffix=audio_path.suffix or ".wav"),
    )
    try:
        result = validator.validate(audio_data, expected)
    except ValidationError as e:
        logger.error(f"Validation could not run: {e}")
        return EXIT_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(result.feedback)
        print(f"Accuracy: {result.accuracy * 100:.0f}%")

    return EXIT_VALID if result.is_valid else EXIT_INVALID


def run_render(args: argparse.Namespace) -> int:
    try:
        notes = _expected_notes(args)
        samples = render_scale(notes, sample_rate=args.sample_rate)
    except (KeyError, ValueError) as e:
        logger.error(f"Invalid arguments: {e}")
        return EXIT_ERROR

    try:
        write_wav(args.output, samples, args.sample_rate)
    except (OSError, RuntimeError) as e:
        # soundfile reports unopenable paths as LibsndfileError (a RuntimeError)
        logger.error(f"Could not write {args.output}: {e}")
        return EXIT_ERROR
    print(f"Wrote {', '.join(notes)} to {args.output}")

    if args.play:
        # Imported here so the rest of the CLI works without PortAudio
        import sounddevice as sd

        sd.play(samples, args.sample_rate)
        sd.wait()

    return EXIT_VALID


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 valid/success, 1 take below threshold, 2 could not run)
    """
    parser = argparse.ArgumentParser(description="Fret Log - Scale Practice Checker")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--verbose", action="store_true", help="Log pipeline progress"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("scales", help="List built-in scales")

    validate_parser = subparsers.add_parser(
        "validate", help="Check a recording against a scale"
    )
    validate_parser.add_argument("audio", type=str, help="Recorded audio file")
    _add_note_source(validate_parser)
    validate_parser.add_argument(
        "--config-profile", type=str, default=None, help="Stored config profile to use"
    )
    validate_parser.add_argument(
        "--config-dir", type=str, default=None, help="Directory holding config profiles"
    )
    validate_parser.add_argument(
        "--confidence-threshold", type=float, default=None, help="Minimum confidence"
    )
    validate_parser.add_argument(
        "--min-duration", type=float, default=None, help="Minimum note duration in seconds"
    )
    validate_parser.add_argument(
        "--passing-accuracy", type=float, default=None, help="Accuracy needed to pass"
    )
    validate_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    render_parser = subparsers.add_parser(
        "render", help="Write reference tones for a scale to a WAV file"
    )
    render_parser.add_argument("output", type=str, help="Output WAV file")
    _add_note_source(render_parser)
    render_parser.add_argument(
        "--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE, help="Sample rate in Hz"
    )
    render_parser.add_argument(
        "--play", action="store_true", help="Also play the tones on the default device"
    )

    # Parse arguments
    parsed_args = parser.parse_args(args)
    if parsed_args.debug:
        setup_logging(level="DEBUG")
    elif parsed_args.verbose:
        setup_logging(level="INFO")
    else:
        setup_logging(level="WARNING")

    # Handle commands
    if parsed_args.command == "scales":
        return run_scales(parsed_args)
    elif parsed_args.command == "validate":
        return run_validate(parsed_args)
    elif parsed_args.command == "render":
        return run_render(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
