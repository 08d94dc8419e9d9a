from __future__ import annotations

"""
CLI entrypoint for the interview coding tool.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import logging
import sys
from dotenv import load_dotenv

from interview_coding.actions.base import Action
from interview_coding.actions.inspect_file import InspectAction
from interview_coding.actions.template import TemplateAction
from interview_coding.actions.window import WindowAction
from interview_coding.config import ConfigError, load_config_or_default
from interview_coding.logging_setup import setup_logging


def _action_repository() -> dict[str, Action]:
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions: list[Action] = [
		TemplateAction(),
		InspectAction(),
		WindowAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="interview-coding",
		description=(
			"Read interview transcripts in different formats and step through them statement by statement."
		),
	)
	parser.add_argument(
		"--verbose",
		"-v",
		action="store_true",
		help="Print diagnostic log messages (e.g. why a transcript format was rejected)",
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			"Path to coding.yaml. If omitted, $INTERVIEW_CODING_CONFIG or ./coding.yaml is used when present."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration, usage or
		transcript errors.

	Raises:
		SystemExit:
			When invoked via `python -m interview_coding.app` (see module guard).
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config = load_config_or_default(getattr(args, "config", None))
			if not args.verbose:
				setup_logging(config.logging.level_number)

		action.run(args, config)
		return 0
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())
