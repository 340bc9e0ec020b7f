# interfaces.py
# Контракты внешних хранилищ. Реализации: database.Database, options.Options,
# scheduler.TaskScheduler, lifecycle.UrlMapCache. В тестах их заменяют фейки.

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class RowStore(Protocol):
    def insert(self, table: str, data: dict) -> Optional[int]: ...

    def update(self, table: str, data: dict, where: dict) -> Optional[int]: ...

    def delete(self, table: str, where: dict) -> Optional[int]: ...

    def get_row(self, table: str, where: dict) -> Optional[dict]: ...

    def get_results(self, table: str, where: Optional[dict] = None, order_by: str = 'id',
                    order: str = 'DESC', limit: int = 0, offset: int = 0) -> list: ...

    def count(self, table: str, where: Optional[dict] = None) -> int: ...


@runtime_checkable
class OptionStore(Protocol):
    def get_option(self, name: str, default: Any = None) -> Any: ...

    def update_option(self, name: str, value: Any) -> bool: ...

    def add_option(self, name: str, value: Any) -> bool: ...


@runtime_checkable
class Scheduler(Protocol):
    def schedule_event(self, hook: str, recurrence: str, first_run: Optional[datetime] = None) -> bool: ...

    def clear_scheduled_task(self, hook: str) -> int: ...


@runtime_checkable
class RoutingCache(Protocol):
    def invalidate(self) -> None: ...
