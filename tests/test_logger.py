from course_planner.logger import logger, should_log


def test_should_log_respects_level(monkeypatch_env):
    monkeypatch_env.setenv("LOG_LEVEL", "warn")
    assert not should_log("info")
    assert should_log("warn")
    assert should_log("error")


def test_logger_silent_in_test_env(capsys):
    logger.error("hidden")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_logger_development_writes_to_stderr(monkeypatch_env, capsys):
    monkeypatch_env.setenv("ENV", "development")
    monkeypatch_env.setenv("LOG_VERBOSITY", "simple")

    logger.info("loaded")
    logger.warn("skipped record")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "INFO: loaded" in captured.err
    assert "WARN: skipped record" in captured.err


def test_logger_detailed_names_caller(monkeypatch_env, capsys):
    monkeypatch_env.setenv("ENV", "development")
    monkeypatch_env.setenv("LOG_VERBOSITY", "detailed")

    logger.info("hello")

    assert "[test_logger_detailed_names_caller@test_logger.py:" in capsys.readouterr().err


def test_logger_production_writes_file(monkeypatch_env, tmp_path):
    log_file = tmp_path / "logs" / "planner.log"
    monkeypatch_env.setenv("ENV", "production")
    monkeypatch_env.setenv("LOG_FILE", str(log_file))

    logger.error("boom")

    assert "ERROR" in log_file.read_text(encoding="utf-8")
    assert "boom" in log_file.read_text(encoding="utf-8")


def test_logger_debug_hidden_at_default_level(monkeypatch_env, capsys):
    monkeypatch_env.setenv("ENV", "development")
    monkeypatch_env.delenv("LOG_LEVEL", raising=False)

    logger.debug("noise")

    assert capsys.readouterr().err == ""
