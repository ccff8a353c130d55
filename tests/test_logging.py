import json
import logging

from geodash.logs import _json_formatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="geodash.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="fetched %d rows",
        args=(10,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_message():
    payload = json.loads(_json_formatter(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "geodash.test"
    assert payload["message"] == "fetched 10 rows"


def test_json_formatter_promotes_extra_fields():
    payload = json.loads(_json_formatter(_record(page=3, filter_text="solar")))
    assert payload["page"] == 3
    assert payload["filter_text"] == "solar"
    assert "pathname" not in payload


def test_configure_logging_sets_root_level():
    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
    configure_logging(level="INFO", json_logs=True)
    assert logging.getLogger().level == logging.INFO
