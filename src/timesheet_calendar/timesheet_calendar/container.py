from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounting.engine import TimeAccountingEngine
from .accounting.factory import ClassificationStrategyFactory
from .accounting.policy import WorkHoursPolicy
from .calendar_view.service import CalendarService
from .common.datetime_utils import parse_clock_time
from .core.constants import DEFAULT_STORAGE_KEY
from .entries.json_file_storage import JsonFileStorage
from .entries.repository import EntryStorage
from .entries.service import EntryService
from .entries.store import EntryStore


@dataclass(frozen=True)
class Container:
    storage: EntryStorage
    entry_store: EntryStore
    engine: TimeAccountingEngine

    entry_service: EntryService
    calendar_service: CalendarService


def build_container(*, app_config: dict, storage: Optional[EntryStorage] = None) -> Container:
    """Wire the object graph once per application.

    ``storage`` replaces the JSON file named by STORAGE_PATH (tests pass an
    in-memory one).
    """
    if storage is None:
        storage = JsonFileStorage(str(app_config["STORAGE_PATH"]))

    policy = WorkHoursPolicy(
        work_start=parse_clock_time(str(app_config.get("WORK_START", "10:00"))),
        work_end=parse_clock_time(str(app_config.get("WORK_END", "19:00"))),
    )
    engine = TimeAccountingEngine(
        policy,
        classification=app_config.get("CLASSIFICATION_POLICY", "all"),
        strategy_factory=ClassificationStrategyFactory(),
    )

    entry_store = EntryStore(storage, key=str(app_config.get("STORAGE_KEY") or DEFAULT_STORAGE_KEY))
    entry_service = EntryService(entry_store)
    calendar_service = CalendarService(entry_store, engine)

    return Container(
        storage=storage,
        entry_store=entry_store,
        engine=engine,
        entry_service=entry_service,
        calendar_service=calendar_service,
    )
