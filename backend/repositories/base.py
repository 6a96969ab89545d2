"""Protocols for the persistence layer and its injected logger."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class StoreLogger(Protocol):
    """Leveled logger capability. logging.Logger satisfies it as-is."""

    def fatal(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


class StoreProtocol(Protocol):
    """Collection-scoped record CRUD. FileStore is the only implementation."""

    def write(self, collection: str, key: str, payload: Any) -> None: ...

    def read(self, collection: str, key: str, model: Optional[type] = None) -> Any: ...

    def read_all(self, collection: str, model: Optional[type] = None) -> list: ...

    def keys(self, collection: str) -> list[str]: ...

    def delete(self, collection: str, key: str) -> None: ...
