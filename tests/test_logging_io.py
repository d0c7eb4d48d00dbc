from __future__ import annotations

import json

from slashdb_configurator.configurator import DeltaFieldConfigurator
from slashdb_configurator.logging_io import load_events, log_configuration_change, make_change_logger
from slashdb_configurator.schemas import NO_SELECTION, AdapterConfiguration


def test_log_configuration_change_appends_jsonl(tmp_path) -> None:
    path = log_configuration_change(
        AdapterConfiguration(deltaField="modified"),
        log_dir=tmp_path,
        metadata={"user": "tester"},
    )

    assert path.parent == tmp_path
    assert path.name.startswith("changes_") and path.suffix == ".jsonl"
    record = json.loads(path.read_text(encoding="utf-8").strip())
    assert record["event"] == "configuration_updated"
    assert record["configuration"] == {"deltaField": "modified"}
    assert record["metadata"] == {"user": "tester"}
    assert record["timestamp"]


def test_change_logger_records_every_selection(tmp_path) -> None:
    configurator = DeltaFieldConfigurator()
    configurator.subscribe(make_change_logger(tmp_path))

    configurator.on_user_select("id")
    configurator.on_user_select(NO_SELECTION)

    events = load_events(tmp_path)
    assert [event["configuration"]["deltaField"] for event in events] == ["id", None]


def test_log_configuration_change_accepts_mappings(tmp_path) -> None:
    log_configuration_change({"deltaField": None, "table": "Orders"}, log_dir=tmp_path)

    events = load_events(tmp_path)
    assert events[0]["configuration"] == {"deltaField": None, "table": "Orders"}


def test_load_events_on_missing_dir_is_empty(tmp_path) -> None:
    assert load_events(tmp_path / "missing") == []
