"""Tests for the transcript hand-over channel and the coding session."""

import logging

import pytest

from interview_coding.inbox import (
    ChannelClosedError,
    CodingSession,
    TranscriptInbox,
    read_file_in_background,
)


class TestInbox:

    def test_nothing_pending(self):
        inbox = TranscriptInbox()
        assert inbox.try_receive() is None

    def test_receive_once(self):
        inbox = TranscriptInbox()
        inbox.sender().send(b"data")
        assert inbox.try_receive() == b"data"
        assert inbox.try_receive() is None

    def test_single_sender(self):
        inbox = TranscriptInbox()
        assert inbox.sender() is inbox.sender()

    def test_pending_item_survives_close(self):
        inbox = TranscriptInbox()
        sender = inbox.sender()
        sender.send(b"data")
        sender.close()
        assert inbox.try_receive() == b"data"

    def test_closed_sender_is_fatal(self):
        inbox = TranscriptInbox()
        inbox.sender().close()
        with pytest.raises(ChannelClosedError):
            inbox.try_receive()

    def test_send_after_close(self):
        inbox = TranscriptInbox()
        sender = inbox.sender()
        sender.close()
        with pytest.raises(ChannelClosedError):
            sender.send(b"data")


class TestBackgroundRead:

    def test_file_is_delivered(self, tmp_path):
        path = tmp_path / "t.vtt"
        path.write_bytes(b"content")
        inbox = TranscriptInbox()

        read_file_in_background(path, inbox.sender()).join(timeout=5)

        assert inbox.try_receive() == b"content"

    def test_missing_file_delivers_nothing(self, tmp_path):
        inbox = TranscriptInbox()

        read_file_in_background(tmp_path / "missing.vtt", inbox.sender()).join(timeout=5)

        assert inbox.try_receive() is None

    def test_closed_sender_is_logged(self, tmp_path, caplog):
        path = tmp_path / "t.vtt"
        path.write_bytes(b"content")
        inbox = TranscriptInbox()
        sender = inbox.sender()
        sender.close()

        with caplog.at_level(logging.ERROR, logger="interview_coding"):
            thread = read_file_in_background(path, sender)
            thread.join(timeout=5)

        assert not thread.is_alive()
        assert any("Could not deliver" in r.getMessage() for r in caplog.records)


class TestCodingSession:

    def test_poll_without_data(self):
        session = CodingSession(TranscriptInbox())
        assert session.poll() is False
        assert session.navigator is None
        assert session.notice is None

    def test_poll_loads_transcript(self, cue_text):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().send(cue_text.encode("utf-8"))

        assert session.poll() is True
        assert session.navigator is not None
        assert session.navigator.current().text == "A"

    def test_bad_file_keeps_previous_navigator(self, cue_text):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().send(cue_text.encode("utf-8"))
        session.poll()
        navigator = session.navigator

        inbox.sender().send(b"no transcript here")

        assert session.poll() is False
        assert session.navigator is navigator
        assert session.notice

    def test_deeply_nested_json_is_a_notice(self):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().send(b'{"a":' * 200000)

        assert session.poll() is False
        assert session.navigator is None
        assert session.notice

    def test_notice_cleared_by_next_success(self, cue_text):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().send(b"no transcript here")
        session.poll()

        inbox.sender().send(cue_text.encode("utf-8"))
        session.poll()

        assert session.notice is None

    def test_transcript_without_segments_is_a_notice(self):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().send(b'{"speakers": [], "segments": []}')

        assert session.poll() is False
        assert session.navigator is None
        assert session.notice

    def test_closed_channel_propagates(self):
        inbox = TranscriptInbox()
        session = CodingSession(inbox)
        inbox.sender().close()
        with pytest.raises(ChannelClosedError):
            session.poll()
