import re

import yaml
from loguru import logger

from cloudqa_testsuites.ui_testing.framework import log_setup
from cloudqa_testsuites.ui_testing.framework.config_loader import ConfigLoader


def test_execution_log_file_receives_timestamped_lines(monkeypatch, tmp_path):
    monkeypatch.delenv("LOGGING_FORMAT", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"logging": {"level": "DEBUG"}}), encoding="utf-8")
    log_file = tmp_path / "logs" / "test-execution.log"

    ConfigLoader.reset()
    log_setup.reset_logger()
    try:
        log_setup.init_logger(log_file=str(log_file), config=ConfigLoader(config_path=config_path))
        logger.info("Test setup completed successfully")
    finally:
        log_setup.reset_logger()
        ConfigLoader.reset()

    content = log_file.read_text(encoding="utf-8")
    assert "Test setup completed successfully" in content
    assert re.search(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\]", content, re.MULTILINE)


def test_init_logger_is_idempotent(tmp_path):
    ConfigLoader.reset()
    log_setup.reset_logger()
    try:
        config = ConfigLoader(config_path=tmp_path / "absent.yaml")
        log_setup.init_logger(level="INFO", log_file=str(tmp_path / "run.log"), config=config)
        handlers = list(log_setup._handler_ids)
        log_setup.init_logger(level="DEBUG", log_file=str(tmp_path / "other.log"), config=config)

        assert log_setup._handler_ids == handlers
        assert not (tmp_path / "other.log").exists()
    finally:
        log_setup.reset_logger()
        ConfigLoader.reset()
