import pytest

from primesteg.errors import FatalError, report_fatal, warning


def test_warning_writes_prefixed_line_to_stderr(capsys):
    warning("disk almost full")
    captured = capsys.readouterr()
    assert captured.err == "Warning: disk almost full\n"
    assert captured.out == ""


def test_report_fatal_prints_and_returns_failure_status(capsys):
    status = report_fatal(FatalError("broken input"))
    captured = capsys.readouterr()
    assert status == 1
    assert captured.err == "Error: broken input\n"


def test_report_fatal_accepts_plain_strings(capsys):
    assert report_fatal("plain") == 1
    assert capsys.readouterr().err == "Error: plain\n"


def test_fatal_error_carries_message_through_raise_and_report(capsys):
    with pytest.raises(FatalError) as excinfo:
        raise FatalError("stop here")
    assert str(excinfo.value) == "stop here"
    assert report_fatal(excinfo.value) == 1
    assert capsys.readouterr().err == "Error: stop here\n"