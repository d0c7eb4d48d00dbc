"""Logging setup and configuration change event log."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .schemas import AdapterConfiguration
from .utils import append_jsonl, load_jsonl, timestamp

LOG_DIR = Path("logs")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Install a basic handler for the ``slashdb_configurator`` loggers."""

    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("slashdb_configurator").setLevel(level)


def _events_path(log_dir: Path) -> Path:
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    return log_dir / f"changes_{today}.jsonl"


def _as_record(configuration: Union[AdapterConfiguration, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(configuration, AdapterConfiguration):
        return configuration.as_dict()
    return dict(configuration)


def log_configuration_change(
    configuration: Union[AdapterConfiguration, Mapping[str, Any]],
    *,
    log_dir: Optional[Path] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Path:
    """Append a configuration change event to the current day's log."""

    record = {
        "timestamp": timestamp(),
        "event": "configuration_updated",
        "configuration": _as_record(configuration),
        "metadata": metadata or {},
    }
    path = _events_path(log_dir if log_dir is not None else LOG_DIR)
    append_jsonl(path, record)
    logger.debug("Recorded configuration change in %s", path)
    return path


def make_change_logger(
    log_dir: Optional[Path] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Callable[[AdapterConfiguration], Path]:
    """Return a listener that records every configuration change."""

    def _listener(configuration: AdapterConfiguration) -> Path:
        return log_configuration_change(configuration, log_dir=log_dir, metadata=metadata)

    return _listener


def load_events(log_dir: Path) -> List[Dict[str, Any]]:
    """Return all change events found in ``log_dir`` in chronological file order."""

    events: List[Dict[str, Any]] = []
    for log_file in sorted(Path(log_dir).glob("changes_*.jsonl")):
        events.extend(load_jsonl(log_file))
    return events


__all__ = [
    "configure_logging",
    "log_configuration_change",
    "make_change_logger",
    "load_events",
]
