# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Window preview action.

Prints the statement at a given position together with its context, the same
view the coding UI shows. Handy to check the window settings in `coding.yaml`.
"""

import argparse
import shutil
from dataclasses import dataclass
from pathlib import Path

from interview_coding.actions.inspect_file import load_transcript_file
from interview_coding.cli_io import shorten
from interview_coding.config import CodingConfig, ConfigError
from interview_coding.model import Segment, Transcript
from interview_coding.navigator import TranscriptNavigator


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {number}")
    return number


@dataclass(frozen=True)
class WindowAction:
    """
    `window` subcommand.

    Window sizes default to the `window` section of the config.
    """

    name: str = "window"
    help: str = "Print a statement with its surrounding context"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `window` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument("file", help="Transcript file (JSON or cue list)")
        parser.add_argument(
            "--at",
            type=_non_negative_int,
            default=0,
            help="0-based statement position (clamped to the last statement; default: 0)",
        )
        parser.add_argument(
            "--before",
            type=_non_negative_int,
            default=None,
            help="Statements shown before the current one (default: from config)",
        )
        parser.add_argument(
            "--after",
            type=_non_negative_int,
            default=None,
            help="Statements shown after the current one (default: from config)",
        )

    def run(self, args: argparse.Namespace, config: CodingConfig | None) -> None:
        """
        Print the window.

        Raises:
            ConfigError:
                If the file cannot be parsed or contains no statements.
        """

        if config is None:
            raise RuntimeError("WindowAction requires a config, but none was provided")

        path = Path(args.file)
        _, transcript = load_transcript_file(path)
        if not transcript.segments:
            raise ConfigError(f"Transcript contains no statements: {path}")

        before = config.window.before if args.before is None else args.before
        after = config.window.after if args.after is None else args.after

        navigator = TranscriptNavigator(transcript)
        while navigator.cursor < args.at and navigator.step_forward() is not None:
            pass

        width = shutil.get_terminal_size((100, 20)).columns
        window = navigator.window(before, after)

        print(f"Statement {navigator.cursor + 1} of {len(navigator)}")
        for index, segment in zip(window.before.indices, window.before):
            print(self._format_line(transcript, index, segment, marker=" ", width=width))
        print(self._format_line(transcript, navigator.cursor, window.current, marker=">", width=width))
        for index, segment in zip(window.after.indices, window.after):
            print(self._format_line(transcript, index, segment, marker=" ", width=width))

    def _format_line(self, transcript: Transcript, index: int, segment: Segment, *, marker: str, width: int) -> str:
        prefix = f"{marker} {index + 1:>4}  {transcript.speaker_name(segment.speaker_id)}: "
        if marker == ">":
            # The current statement is shown in full.
            return prefix + segment.text
        return shorten(prefix + segment.text, width)
