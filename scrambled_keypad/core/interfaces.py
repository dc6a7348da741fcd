from abc import ABC, abstractmethod
from typing import Any, Callable


class IScheduler(ABC):
    """Delayed-callback source. All callbacks run on the caller's thread."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        pass

    @abstractmethod
    def cancel(self, handle: Any):
        pass


class IHapticsEngine(ABC):
    @abstractmethod
    def vibrate(self, enabled: bool):
        pass


class NullHaptics(IHapticsEngine):
    def vibrate(self, enabled: bool):
        pass
