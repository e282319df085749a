import re

import pytest

from gaia_log.core.recorder import LogRecorder, Severity, generate_log_text


LINE = re.compile(r"^\d{2}:\d{2}:\d{2}\|(Message|Milestone|Warning|Error)\|[^|]*\|.*$")


def test_generate_log_text_layout():
    text = generate_log_text("disk low", Severity.WARNING, "probe")
    assert LINE.match(text)
    assert text.split("|", 1)[1] == "Warning|probe|disk low"


def test_generate_log_text_default_author():
    assert generate_log_text("hi", Severity.MESSAGE).endswith("|Message|Anonymous|hi")


def test_generate_log_text_accepts_label_string():
    assert "|Milestone|" in generate_log_text("up", "Milestone")


def test_recorder_creates_directory_and_file(tmp_path):
    target = tmp_path / "nested" / "logs"
    with LogRecorder(str(target)) as recorder:
        assert target.is_dir()
        assert recorder.log_name.endswith(".log")
        assert (target / recorder.log_name).exists()


@pytest.mark.parametrize("method, label", [
    ("record_message", "Message"),
    ("record_milestone", "Milestone"),
    ("record_warning", "Warning"),
    ("record_error", "Error"),
])
def test_severity_helpers_write_one_line(tmp_path, method, label):
    with LogRecorder(str(tmp_path)) as recorder:
        getattr(recorder, method)("body", "tester")
        path = recorder.log_path
    lines = open(path, encoding="utf-8").read().splitlines()
    assert len(lines) == 1
    assert lines[0].split("|", 1)[1] == f"{label}|tester|body"


def test_lines_are_flushed_immediately(tmp_path):
    recorder = LogRecorder(str(tmp_path))
    recorder.record_raw_text("first")
    # still open, content must already be on disk
    assert open(recorder.log_path, encoding="utf-8").read() == "first\n"
    recorder.close()


def test_print_to_console_echoes(tmp_path, capsys):
    with LogRecorder(str(tmp_path), print_to_console=True) as recorder:
        recorder.record_raw_text("echoed")
    assert capsys.readouterr().out == "echoed\n"


def test_quiet_by_default(tmp_path, capsys):
    with LogRecorder(str(tmp_path)) as recorder:
        recorder.record_raw_text("quiet")
    assert capsys.readouterr().out == ""


def test_close_is_idempotent_and_blocks_writes(tmp_path):
    recorder = LogRecorder(str(tmp_path))
    recorder.close()
    recorder.close()
    assert recorder.closed
    with pytest.raises(ValueError):
        recorder.record_raw_text("late")
