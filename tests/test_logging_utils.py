import json

from cavegen.logging_utils import get_logger


def test_key_value_line(capsys):
    log = get_logger("cavegen.test")
    log.info(event="cave_generated", seed="crystal grotto", rooms=3, skipped=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=cave_generated" in out
    assert "seed=crystal_grotto" in out
    assert "rooms=3" in out
    assert "logger=cavegen.test" in out
    assert "skipped" not in out


def test_level_threshold(monkeypatch, capsys):
    log = get_logger("cavegen.test")
    log.debug(event="hidden")
    assert capsys.readouterr().out == ""
    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "debug")
    log.debug(event="shown")
    assert "event=shown" in capsys.readouterr().out
    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "error")
    log.warn(event="quiet")
    assert capsys.readouterr().out == ""


def test_error_goes_to_stderr(capsys):
    get_logger("cavegen.test").error(event="boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "level=error" in captured.err


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("CAVEGEN_LOG_JSON", "1")
    get_logger("cavegen.test").info(event="cave_generated", rooms=2)
    rec = json.loads(capsys.readouterr().out)
    assert rec["event"] == "cave_generated"
    assert rec["rooms"] == 2
    assert rec["level"] == "info"
    assert isinstance(rec["ts"], int)


def test_logger_instances_cached():
    assert get_logger("cavegen.same") is get_logger("cavegen.same")
