import json
import logging

import pytest

from vdom.utils.config import Config, DEFAULT_VOID_ELEMENTS
from vdom.utils.logging import LogFormatter, PerformanceLogger, setup_logging, setup_logging_from_config


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "vdom" / "config.json")


def test_defaults_without_file(config_path):
    config = Config(config_path)
    assert config.get("parser.encoding") == "utf-8"
    assert config.get("parser.keep_whitespace") is True
    assert config.get("parser.void_elements") == DEFAULT_VOID_ELEMENTS
    assert config.get("parser.missing", "fallback") == "fallback"


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"parser": {"keep_whitespace": False}}))
    config = Config(str(path))
    assert config.get("parser.keep_whitespace") is False
    assert config.get("parser.encoding") == "utf-8"


def test_broken_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(str(path))
    assert config.get("parser.encoding") == "utf-8"


def test_env_var_selects_config(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"logging": {"console_level": "DEBUG"}}))
    monkeypatch.setenv("VDOM_CONFIG", str(path))
    assert Config().get("logging.console_level") == "DEBUG"


def test_set_remove_and_save(config_path):
    config = Config(config_path)
    config.set("report.colors.enabled", True)
    assert config.get("report.colors.enabled") is True
    config.save()

    reloaded = Config(config_path)
    assert reloaded.get("report.colors.enabled") is True
    assert reloaded.remove("report.colors.enabled")
    assert not reloaded.remove("report.colors.enabled")


def test_get_all_is_a_copy(config_path):
    config = Config(config_path)
    snapshot = config.get_all()
    snapshot["parser"]["encoding"] = "ascii"
    assert config.get("parser.encoding") == "utf-8"


def test_setup_logging_is_idempotent():
    logger = setup_logging(component="tests_idempotent", colored=False)
    handlers = list(logger.handlers)
    assert setup_logging(component="tests_idempotent") is logger
    assert logger.handlers == handlers
    assert logger.name == "vdom.tests_idempotent"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "vdom.log"
    logger = setup_logging(log_file=str(log_file), component="tests_file")
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text()


def test_formatter_colours_level():
    formatter = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s")
    formatter.colored = True
    record = logging.LogRecord("vdom", logging.ERROR, __file__, 1, "boom", None, None)
    assert formatter.format(record) == "[\033[31mERROR\033[0m] boom"


def test_performance_logger(caplog):
    perf = PerformanceLogger(logging.getLogger("vdom.tests_perf"), "Parser")
    with caplog.at_level(logging.DEBUG, logger="vdom.tests_perf"):
        perf.start("parse")
        assert perf.end("parse") >= 0
        assert perf.end("parse") == 0.0
    assert "Parser parse took" in caplog.text
    assert "No start time found for parse" in caplog.text


def test_setup_logging_from_config(config_path, tmp_path):
    config = Config(config_path)
    config.set("logging.file", str(tmp_path / "from_config.log"))
    config.set("logging.console_level", "WARNING")
    logger = logging.getLogger("vdom")
    saved = list(logger.handlers), logger.level
    try:
        logger.handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        configured = setup_logging_from_config(config)
        assert configured is logger
        levels = sorted(h.level for h in configured.handlers if not isinstance(h, logging.NullHandler))
        assert levels == [logging.DEBUG, logging.WARNING]
    finally:
        for handler in logger.handlers:
            if handler not in saved[0]:
                handler.close()
        logger.handlers, logger.level = saved
