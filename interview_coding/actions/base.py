from __future__ import annotations

"""
Protocol shared by the `template`, `inspect` and `window` subcommands.

`app.build_parser()` gives every action its own subparser, and `app.main()`
hands it the parsed arguments plus the `coding.yaml` settings when it asks
for them.
"""

import argparse
from typing import Protocol

from interview_coding.config import CodingConfig


class Action(Protocol):
    """
    One subcommand of `interview-coding`.

    Attributes:
        name:
            Subcommand name on the command line.
        help:
            One-line summary shown by `interview-coding --help`.
        requires_config:
            Whether `main()` loads `coding.yaml` (and offers `--config`) before
            calling `run()`.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None: ...

    def run(self, args: argparse.Namespace, config: CodingConfig | None) -> None:
        """
        Carry out the subcommand.

        `config` is None unless `requires_config` is set. Errors meant for the
        user are raised as `ConfigError`; `main()` prints them and exits with 2.
        """
