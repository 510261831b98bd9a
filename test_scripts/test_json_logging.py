# Tests for the JSON logging setup
import io
import json
import logging

import pytest

from featureprio.config import setup_json_logging


@pytest.fixture
def json_stream():
    root = logging.getLogger("featureprio")
    saved = (root.handlers[:], root.level, root.propagate)
    setup_json_logging(logging.DEBUG)
    stream = io.StringIO()
    root.handlers[0].setStream(stream)
    yield stream
    root.handlers, root.level, root.propagate = saved[0], saved[1], saved[2]


def _last_json_line(stream: io.StringIO) -> dict:
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return json.loads(lines[-1])


def test_extra_fields_are_emitted(json_stream):
    logging.getLogger("featureprio.test").warning(
        "scoring.warning",
        extra={"feature_id": "f-1", "framework": "rice", "warning": "RICE: floored"},
    )

    record = _last_json_line(json_stream)
    assert record["message"] == "scoring.warning"
    assert record["feature_id"] == "f-1"
    assert record["framework"] == "rice"
    assert record["levelname"] == "WARNING"


def test_none_fields_are_dropped(json_stream):
    logging.getLogger("featureprio.test").info("scoring.batch_done", extra={"scored": 3})

    record = _last_json_line(json_stream)
    assert record["scored"] == 3
    assert "feature_id" not in record
    assert "final_score" not in record


def test_child_logger_below_level_is_filtered(json_stream):
    logging.getLogger("featureprio").setLevel(logging.INFO)
    logging.getLogger("featureprio.test").debug("scoring.computed", extra={"feature_id": "f-2"})

    assert json_stream.getvalue() == ""


def test_setup_is_idempotent(json_stream):
    setup_json_logging(logging.INFO)
    assert len(logging.getLogger("featureprio").handlers) == 1
    assert logging.getLogger("featureprio").propagate is False
