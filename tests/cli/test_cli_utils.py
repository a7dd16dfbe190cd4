import argparse
import logging

import pytest

from suitemap.cli import parse_params, setup_logging
from suitemap.core.exceptions import ConfigLoadError


def test_parse_params():
    assert parse_params(["a=1", "b=x=y", "flag"]) == {"a": "1", "b": "x=y", "flag": ""}
    assert parse_params(None) == {}


def test_parse_params_rejects_empty_name():
    with pytest.raises(ConfigLoadError):
        parse_params(["=1"])


def _ns(**kwargs):
    defaults = {"log_level": "WARNING", "log_file": None, "debug": None, "json": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


def test_debug_raises_log_level_to_info():
    setup_logging(_ns(debug=True))

    assert logging.getLogger().level == logging.INFO


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "logs" / "suitemap.log"
    setup_logging(_ns(log_level="DEBUG", log_file=str(log_file)))

    logging.getLogger("suitemap.test").debug("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_json_mode_leaves_stderr_clean(capsys):
    setup_logging(_ns(json=True))

    logging.getLogger("suitemap.test").warning("should not surface")

    assert capsys.readouterr().err == ""
