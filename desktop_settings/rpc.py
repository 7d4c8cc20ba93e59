"""Named async handlers that expose the settings store to an RPC transport.

The transport itself (framing, IPC) lives outside this package. It looks up a
handler by resource name and awaits it with ``(project_id, body)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List

from .settings import SettingsStore

GET_SETTINGS = "getSettings"
UPDATE_SETTINGS = "updateSettings"

HandlerFn = Callable[[str, Any], Awaitable[Any]]


@dataclass(frozen=True)
class RpcHandler:
    resource: str
    handler: HandlerFn


def get_settings_handler(store: SettingsStore) -> RpcHandler:
    async def handler(_project_id: str, _body: Any = None) -> Dict[str, Any]:
        # Always reflect the file, in case it changed outside the app.
        return store.reload().to_dict()

    return RpcHandler(GET_SETTINGS, handler)


def update_settings_handler(store: SettingsStore) -> RpcHandler:
    async def handler(_project_id: str, body: Any) -> None:
        return store.apply_update(body)

    return RpcHandler(UPDATE_SETTINGS, handler)


class HandlerRegistry:
    """Resource name -> handler lookup used by the transport."""

    def __init__(self) -> None:
        self._handlers: Dict[str, HandlerFn] = {}

    def register(self, handler: RpcHandler) -> None:
        if handler.resource in self._handlers:
            raise ValueError(f"Handler already registered for {handler.resource!r}")
        self._handlers[handler.resource] = handler.handler

    def resources(self) -> List[str]:
        return sorted(self._handlers)

    async def dispatch(self, resource: str, project_id: str = "", body: Any = None) -> Any:
        try:
            fn = self._handlers[resource]
        except KeyError:
            raise KeyError(f"No handler for resource {resource!r}") from None
        return await fn(project_id, body)


def register_settings_handlers(registry: HandlerRegistry, store: SettingsStore) -> None:
    registry.register(get_settings_handler(store))
    registry.register(update_settings_handler(store))


__all__ = [
    "GET_SETTINGS",
    "UPDATE_SETTINGS",
    "HandlerRegistry",
    "RpcHandler",
    "get_settings_handler",
    "register_settings_handlers",
    "update_settings_handler",
]
