"""Process-wide user preferences with change notification."""

from __future__ import annotations

from typing import Callable, ClassVar, List, Optional


class Settings:
    """Application settings shared by the whole process.

    Use :meth:`instance` to obtain the shared object. Listeners registered
    with :meth:`on_prettify_symbols_changed` are called with the new value
    whenever the prettify-symbols preference actually changes.
    """

    _instance: ClassVar[Optional["Settings"]] = None

    def __init__(self) -> None:
        self._prettify_symbols = True
        self._prettify_listeners: List[Callable[[bool], None]] = []

    @classmethod
    def instance(cls) -> "Settings":
        """Return the shared settings object, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def prettify_symbols(self) -> bool:
        """Whether symbols are shown in their prettified form."""
        return self._prettify_symbols

    @prettify_symbols.setter
    def prettify_symbols(self, value: bool) -> None:
        self.set_prettify_symbols(value)

    def set_prettify_symbols(self, prettify_symbols: bool) -> None:
        """Change the preference, notifying listeners only on a real change."""
        prettify_symbols = bool(prettify_symbols)
        if self._prettify_symbols == prettify_symbols:
            return
        self._prettify_symbols = prettify_symbols
        for callback in list(self._prettify_listeners):
            callback(prettify_symbols)

    def on_prettify_symbols_changed(
        self, callback: Callable[[bool], None]
    ) -> Callable[[], None]:
        """Register a listener and return a function that unregisters it."""
        self._prettify_listeners.append(callback)

        def disconnect() -> None:
            if callback in self._prettify_listeners:
                self._prettify_listeners.remove(callback)

        return disconnect