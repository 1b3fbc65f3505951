"""Command line interface for sequence-stats."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LOG_LEVELS, OUTPUT_FORMATS, build_settings, load_config
from .errors import SequenceStatsError
from .pipeline import ON_INVALID_CHOICES, run_analysis
from .reader import read_sequences
from .report import RENDERERS

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqstats",
        description=(
            "Read a sequence count and that many nucleotide sequences from standard "
            "input, then report frequencies, GC/AT content, lengths and complements."
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML configuration file.",
    )
    parser.add_argument(
        "--normalize-case",
        action="store_const",
        const=True,
        default=None,
        help="Uppercase strands before complementing instead of rejecting lowercase bases.",
    )
    parser.add_argument(
        "--on-invalid",
        choices=ON_INVALID_CHOICES,
        help="Keep going or stop at the first sequence that cannot be complemented (default: continue).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output layout (default: text).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity on stderr (default: WARNING).",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Never print input prompts, even on an interactive terminal.",
    )
    return parser


def _report_error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(
            load_config(args.config),
            normalize_case=args.normalize_case,
            on_invalid=args.on_invalid,
            output_format=args.output_format,
            log_level=args.log_level,
        )
    except (OSError, ValueError) as exc:
        return _report_error(str(exc))

    logging.basicConfig(
        level=settings.log_level_value,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    interactive = sys.stdin.isatty() and not args.no_prompt
    try:
        sequences = read_sequences(sys.stdin, prompt=sys.stdout if interactive else None)
    except SequenceStatsError as exc:
        return _report_error(str(exc))
    except UnicodeDecodeError as exc:
        return _report_error(f"Input is not valid {exc.encoding} text: {exc.reason}")

    summary = run_analysis(sequences, settings.analysis)
    print(RENDERERS[settings.output_format](summary))
    if summary["aborted"]:
        LOGGER.info("Run aborted on an invalid sequence")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
