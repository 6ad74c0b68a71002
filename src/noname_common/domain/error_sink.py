"""ErrorSink — per-field, ordered accumulation of validation messages."""

from __future__ import annotations

from noname_common.domain.collection import Collection


class ErrorSink:
    """Maps field names to the ordered list of messages recorded for them.

    Fields appear in the order their first error was recorded.
    """

    def __init__(self) -> None:
        self._errors: Collection[list[str]] = Collection()

    def add(self, name: str, message: str) -> None:
        """Append *message* to the list for *name*, creating it if needed."""
        messages = self._errors.get(name)
        if messages is None:
            self._errors.set(name, [message])
        else:
            messages.append(message)

    def messages(self, name: str) -> list[str]:
        """Messages recorded for *name* (a copy; empty when none)."""
        return list(self._errors.get(name, []))

    def count(self, name: str | None = None) -> int:
        """Number of messages for *name*, or number of errored fields if None."""
        if name is None:
            return self._errors.count()
        return len(self._errors.get(name, []))

    def has(self, name: str) -> bool:
        return self._errors.has(name)

    def has_errors(self) -> bool:
        return self._errors.count() > 0

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(messages) for name, messages in self._errors}

    def clear(self) -> None:
        self._errors.destroy()

    def __bool__(self) -> bool:
        return self.has_errors()

    def __len__(self) -> int:
        return self._errors.count()
