# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Hand-over of transcript files from a background reader.

Picking and reading a file may block, so it runs on a background thread. The
thread hands the raw bytes to the UI side through a `TranscriptInbox`, a
single-producer/single-consumer channel that holds at most one pending file.
The UI polls it once per refresh with `try_receive()`, which never blocks.

Once the bytes are received the consumer owns them exclusively; the transcript
built from them is never shared with the producer, so no locking is needed.
"""

import logging
import queue
import threading
from pathlib import Path

from interview_coding.navigator import TranscriptNavigator
from interview_coding.transcripts.base import UnparseableTranscriptError
from interview_coding.transcripts.resolver import resolve_transcript


logger = logging.getLogger(__name__)


class ChannelClosedError(RuntimeError):
    """The producing side went away while the consumer still expects data."""


class TranscriptSender:
    """Producing end of a `TranscriptInbox`."""

    def __init__(self, inbox: TranscriptInbox) -> None:
        self._inbox = inbox

    def send(self, data: bytes) -> None:
        """Deliver file content, waiting while a previous file is still pending.

        Raises:
            ChannelClosedError:
                If the sender was already closed.
        """

        if self._inbox._closed.is_set():
            raise ChannelClosedError("Cannot send on a closed transcript channel")
        self._inbox._queue.put(data)

    def close(self) -> None:
        self._inbox._closed.set()


class TranscriptInbox:
    """Bounded (one pending item) channel for raw transcript bytes."""

    def __init__(self) -> None:
        self._queue: queue.Queue[bytes] = queue.Queue(maxsize=1)
        self._closed = threading.Event()
        self._sender: TranscriptSender | None = None

    def sender(self) -> TranscriptSender:
        """Return the single producing end of this inbox."""

        if self._sender is None:
            self._sender = TranscriptSender(self)
        return self._sender

    def try_receive(self) -> bytes | None:
        """Take the pending file content, if any.

        Returns:
            The raw bytes, or None if nothing has been delivered yet.

        Raises:
            ChannelClosedError:
                If the sender was closed and nothing is pending.
        """

        try:
            return self._queue.get_nowait()
        except queue.Empty:
            if self._closed.is_set():
                raise ChannelClosedError("Transcript sender has been dropped") from None
            return None


def read_file_in_background(path: Path, sender: TranscriptSender) -> threading.Thread:
    """Read a file on a daemon thread and deliver its bytes.

    A file that cannot be read is logged and nothing is delivered; the UI
    keeps polling without a result, as if no file had been picked.

    Returns:
        The started thread.
    """

    def _worker() -> None:
        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.warning("Could not read transcript file %s: %s", path, exc)
            return

        logger.debug("Read %d byte(s) from %s", len(data), path)
        try:
            sender.send(data)
        except ChannelClosedError as exc:
            logger.error("Could not deliver transcript file %s: %s", path, exc)

    thread = threading.Thread(target=_worker, name=f"read-transcript:{path.name}", daemon=True)
    thread.start()
    return thread


class CodingSession:
    """Consumer side: turns delivered files into a navigator.

    Attributes:
        navigator:
            Navigator over the most recently loaded transcript, if any.
        notice:
            User-facing message about the last failed load, cleared by the next
            successful one.
    """

    def __init__(self, inbox: TranscriptInbox) -> None:
        self.inbox = inbox
        self.navigator: TranscriptNavigator | None = None
        self.notice: str | None = None

    def poll(self) -> bool:
        """Check the inbox once.

        Returns:
            True if a new transcript was loaded.

        Raises:
            ChannelClosedError:
                Propagated from the inbox.
        """

        data = self.inbox.try_receive()
        if data is None:
            return False

        try:
            transcript = resolve_transcript(data)
        except UnparseableTranscriptError as exc:
            for name, error in exc.attempts:
                logger.debug("%s parser: %s", name, error)
            logger.warning("%s", exc)
            self.notice = "Could not read the file: unsupported or malformed transcript."
            return False

        if not transcript.segments:
            logger.warning("Transcript contains no segments")
            self.notice = "The file does not contain any statements."
            return False

        self.navigator = TranscriptNavigator(transcript)
        self.notice = None
        return True
