import io
import re

import pytest

from gotismadex.logger import DRAW_COLOR, NONE_COLOR, Logger, get_logger

STAMP = r'timestamp="\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"'


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


def test_log_info(streams):
    out, err = streams
    log = Logger(stdout=out, stderr=err)
    log.configure(0)
    log.info("test", "this is a unit test with info log.")
    assert re.fullmatch(
        STAMP + r' level=INFO endpoint=test message="this is a unit test with info log\."\n',
        out.getvalue(),
    )
    assert err.getvalue() == ""


def test_log_info_suppressed_above_zero(streams):
    out, err = streams
    log = Logger(level=1, stdout=out, stderr=err)
    log.info("test", "hidden")
    assert out.getvalue() == ""


def test_log_warning(streams):
    out, err = streams
    log = Logger(stdout=out, stderr=err)
    log.warning("test", "this is a unit test with warning log.", ValueError("Warniiiing"))
    written = err.getvalue()
    assert out.getvalue() == ""
    assert written.endswith('detailes="Warniiiing"\n')
    assert " level=WARNING endpoint=test " in written
    assert re.fullmatch(
        STAMP + r' level=WARNING endpoint=test message="this is a unit test with warning log\."'
        r' detailes="Warniiiing"\n',
        written,
    )


@pytest.mark.parametrize("level,shown", [(0, True), (1, True), (2, False)])
def test_log_warning_levels(streams, level, shown):
    out, err = streams
    log = Logger(level=level, stdout=out, stderr=err)
    log.warning("test", "w", ValueError("x"))
    assert ("level=WARNING" in err.getvalue()) is shown


def test_log_error_always_written(streams):
    out, err = streams
    log = Logger(level=5, stdout=out, stderr=err)
    log.error("test", "this is a unit test with errror log.", ValueError("Errooooor"))
    assert 'level=ERROR endpoint=test' in err.getvalue()
    assert err.getvalue().endswith('detailes="Errooooor"\n')


def test_log_critical_without_exit(streams):
    out, err = streams
    log = Logger(stdout=out, stderr=err)
    log.critical("test", "this is a unit test with critical log.", ValueError("Criticaaaal"), False)
    assert "level=CRITICAL" in err.getvalue()
    assert 'detailes="Criticaaaal"' in err.getvalue()


def test_log_critical_exits(streams):
    out, err = streams
    log = Logger(stdout=out, stderr=err)
    with pytest.raises(SystemExit) as info:
        log.critical("test", "fatal", ValueError("boom"))
    assert info.value.code == 1
    assert "level=CRITICAL" in err.getvalue()


def test_draw(streams):
    out, err = streams
    log = Logger(stdout=out, stderr=err)
    log.draw("banner")
    assert out.getvalue() == f"{DRAW_COLOR} banner {NONE_COLOR}\n"


def test_default_streams(capsys):
    log = Logger()
    log.info("test", "to stdout")
    log.error("test", "to stderr", ValueError("e"))
    captured = capsys.readouterr()
    assert 'message="to stdout"' in captured.out
    assert 'message="to stderr"' in captured.err


def test_the_logger_is_shared():
    first = get_logger()
    assert first is get_logger()
    assert isinstance(first, Logger)