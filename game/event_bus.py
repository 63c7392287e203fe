from typing import Callable, Dict, List, Any

# Event names published by the game session.
WORLD_EDIT = "world_edit"          # (edit: WorldEdit)
RESPAWN = "respawn"                # (signal: RespawnSignal)
WORLD_REPLACED = "world_replaced"  # (world: WorldGrid, seed: float)


class EventBus:
    """Simple pub/sub event bus."""
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[..., None]]] = {}

    def subscribe(self, event: str, cb: Callable[..., None]) -> None:
        self._subs.setdefault(event, []).append(cb)

    def unsubscribe(self, event: str, cb: Callable[..., None]) -> None:
        subs = self._subs.get(event, [])
        if cb in subs:
            subs.remove(cb)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        for cb in list(self._subs.get(event, [])):
            cb(*args, **kwargs)
