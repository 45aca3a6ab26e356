from __future__ import annotations

from collections.abc import Callable
from typing import Any

ChangeListener = Callable[[Any, str], None]


class ObservableEntity:
    """Base class for objects that report field changes and field errors.

    Fields live in ``_<name>`` attributes and are written through
    ``_set_field`` / ``_set_field_validated``. Listeners are called
    synchronously as ``listener(sender, field_name)`` in the order they
    subscribed, and all of them return before the setter does.
    """

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []
        self._errors: dict[str, list[str]] = {}

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, field_name: str) -> None:
        for listener in list(self._listeners):
            listener(self, field_name)

    def before_field_update(self, field_name: str) -> None:
        """Called right before ``field_name`` is overwritten with a new value."""

    def _set_field(self, field_name: str, value: Any) -> bool:
        attr = f"_{field_name}"
        if getattr(self, attr, None) == value:
            return False

        self.before_field_update(field_name)
        setattr(self, attr, value)
        self.notify(field_name)
        return True

    def _set_field_validated(self, field_name: str, value: Any, validator: Callable[[], None]) -> bool:
        attr = f"_{field_name}"
        changed = getattr(self, attr, None) != value
        if changed:
            self.before_field_update(field_name)

        # Invalid values are stored too; the validator only records errors.
        setattr(self, attr, value)
        validator()

        if changed:
            self.notify(field_name)
        return changed

    def get_errors(self, field_name: str) -> list[str] | None:
        errors = self._errors.get(field_name)
        if not errors:
            return None
        return list(errors)

    def has_errors(self, field_name: str | None = None) -> bool:
        if field_name is None:
            return any(self._errors.values())
        return bool(self._errors.get(field_name))

    def clear_errors(self, field_name: str) -> None:
        self._errors.pop(field_name, None)

    def add_error(self, field_name: str, message: str) -> None:
        self._errors.setdefault(field_name, []).append(message)
