# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `coding.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from interview_coding.cli_io import is_interactive_tty, prompt_overwrite
from interview_coding.config import DEFAULT_CONFIG_NAME, CodingConfig, ConfigError


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template coding.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Supported transcript formats (detected from the content, not the file name):",
            "#   - JSON with 'speakers' [{spkid, name}] and 'segments' [{speaker, words: [{text}]}]",
            "#   - Cue lists (WebVTT/SRT-like): index line, timestamp line, 'Speaker: text' line",
            "",
            "# Context shown around the current statement (optional; defaults shown)",
            "window:",
            "  before: 1",
            "  after: 1",
            "",
            "# Diagnostic output on stderr (optional; default shown)",
            "# One of: DEBUG, INFO, WARNING, ERROR",
            "logging:",
            "  level: WARNING",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default=DEFAULT_CONFIG_NAME,
            help=f"Destination path for the template (default: ./{DEFAULT_CONFIG_NAME})",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: CodingConfig | None) -> None:
        """
        Execute the template writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If the destination exists, `--force` is not set and the user
                did not agree to overwrite it.
        """

        _ = config
        dest = Path(args.path)

        force = bool(args.force)
        if dest.exists() and not force and is_interactive_tty():
            force = prompt_overwrite(dest)
            if not force:
                print("Aborted.")
                return

        self._write_template(dest, force=force)
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        """
        Write a template YAML configuration file.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
            OSError:
                If the file cannot be written.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
