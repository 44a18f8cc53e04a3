"""Tests for the session transcript."""

import pytest
from flashdeck.core.transcript import Transcript, TranscriptError


class TestTranscript:
    def test_records_lines_in_order(self):
        transcript = Transcript()
        transcript.record("The card:")
        transcript.record("France")
        assert transcript.text == "The card:\nFrance\n"
        assert len(transcript) == 2

    def test_empty_line_kept(self):
        transcript = Transcript()
        transcript.record("")
        assert transcript.text == "\n"

    def test_save(self, tmp_path):
        transcript = Transcript()
        transcript.record("hello")
        path = tmp_path / "log.txt"

        transcript.save(path)
        assert path.read_text(encoding="utf-8") == "hello\n"

    def test_save_failure(self, tmp_path):
        with pytest.raises(TranscriptError):
            Transcript().save(tmp_path / "missing-dir" / "log.txt")
