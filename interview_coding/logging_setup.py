# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Configure diagnostic logging to stderr.

Regular command output is printed to stdout. Log records carry diagnostics
such as why a transcript format was rejected.
"""

import logging
import sys

_LOGGER_NAME = "interview_coding"
_handler: logging.StreamHandler | None = None


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Return the package logger, attaching a stderr handler once.

    Calling this again changes the level and points the handler at the current
    `sys.stderr`, which may have been replaced since the first call.
    """

    global _handler
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s  %(levelname)-8s  %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(_handler)
    else:
        _handler.setStream(sys.stderr)

    return logger
