import logging

from embed_models.utils.logging_utils import LOG_LEVEL_ENV, configure_split_stream_logging, level_from_env


def test_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert level_from_env() == logging.DEBUG


def test_level_from_env_falls_back(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert level_from_env(logging.WARNING) == logging.WARNING
    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert level_from_env() == logging.INFO


def test_split_streams(restore_root_logging, capsys):
    configure_split_stream_logging(level=logging.INFO)
    logger = logging.getLogger("embed_models.test")
    logger.info("to stdout")
    logger.warning("to stderr")

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "to stdout" not in captured.err
    assert "to stderr" in captured.err
    assert "to stderr" not in captured.out


def test_level_from_env_accepts_numeric_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, " 30 ")
    assert level_from_env() == logging.WARNING


def test_root_level_from_env(restore_root_logging, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    configure_split_stream_logging()
    assert logging.getLogger().level == logging.ERROR


def test_stderr_threshold_is_configurable(restore_root_logging, capsys):
    stdout_handler, stderr_handler = configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.ERROR)
    assert logging.getLogger().handlers == [stdout_handler, stderr_handler]

    logger = logging.getLogger("embed_models.test")
    logger.warning("still stdout")
    logger.error("now stderr")

    captured = capsys.readouterr()
    assert "still stdout" in captured.out
    assert "now stderr" in captured.err
    assert "now stderr" not in captured.out
