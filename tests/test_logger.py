import json
import logging

from pkcs15_core.logger import get_logger


def test_logger_writes_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "pkcs15.log"
    log = get_logger("pkcs15.test_file", to_file=str(log_file))
    log.info("resolved value")
    for h in log.handlers:
        h.flush()

    line = log_file.read_text().strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["level"] == "INFO"
    assert rec["name"] == "pkcs15.test_file"
    assert rec["msg"] == "resolved value"


def test_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("PKCS15_LOG_LEVEL", "debug")
    log = get_logger("pkcs15.test_env")
    assert log.level == logging.DEBUG


def test_logger_adds_context_fields(tmp_path):
    log_file = tmp_path / "ctx.log"
    log = get_logger("pkcs15.test_ctx", to_file=str(log_file))
    log.warning('keyInfo reference 9 not "found"', extra={"field": "keyInfo", "key": 9})
    for h in log.handlers:
        h.flush()

    rec = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert rec["msg"] == 'keyInfo reference 9 not "found"'
    assert rec["field"] == "keyInfo"
    assert rec["key"] == "9"
    assert "record" not in rec
