from __future__ import annotations

from typing import Any

from age_profile.observable import ObservableEntity


class Sample(ObservableEntity):
    def __init__(self) -> None:
        super().__init__()
        self._name = ""
        self._code = 0
        self.replaced: list[tuple[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, value: str) -> bool:
        return self._set_field("name", value)

    def set_code(self, value: int) -> bool:
        return self._set_field_validated("code", value, self._validate_code)

    def _validate_code(self) -> None:
        self.clear_errors("code")
        if self._code < 0:
            self.add_error("code", "code must not be negative")
        if self._code > 99:
            self.add_error("code", "code must be below 100")

    def before_field_update(self, field_name: str) -> None:
        self.replaced.append((field_name, getattr(self, f"_{field_name}")))


def _recorder(events: list[str], tag: str = ""):
    def listener(sender: Any, field_name: str) -> None:
        events.append(f"{tag}{field_name}")

    return listener


def test_set_field_notifies_on_change_only() -> None:
    sample = Sample()
    events: list[str] = []
    sample.subscribe(_recorder(events))

    assert sample.set_name("Alice") is True
    assert sample.set_name("Alice") is False
    assert sample.name == "Alice"
    assert events == ["name"]


def test_listeners_run_in_subscription_order() -> None:
    sample = Sample()
    events: list[str] = []
    sample.subscribe(_recorder(events, "first:"))
    sample.subscribe(_recorder(events, "second:"))

    sample.set_name("Bob")

    assert events == ["first:name", "second:name"]


def test_listener_receives_sender() -> None:
    sample = Sample()
    senders: list[Any] = []
    sample.subscribe(lambda sender, field_name: senders.append(sender))

    sample.set_name("Carol")

    assert senders == [sample]


def test_unsubscribe_stops_notifications() -> None:
    sample = Sample()
    events: list[str] = []
    listener = _recorder(events)
    sample.subscribe(listener)
    sample.unsubscribe(listener)
    sample.unsubscribe(listener)

    sample.set_name("Dan")

    assert events == []


def test_before_field_update_sees_old_value() -> None:
    sample = Sample()
    sample.set_name("Eve")
    sample.set_name("Frank")
    sample.set_name("Frank")

    assert sample.replaced == [("name", ""), ("name", "Eve")]


def test_validated_field_keeps_invalid_value() -> None:
    sample = Sample()
    events: list[str] = []
    sample.subscribe(_recorder(events))

    assert sample.set_code(-5) is True
    assert sample._code == -5
    assert sample.get_errors("code") == ["code must not be negative"]
    assert events == ["code"]


def test_validated_field_reports_change_independent_of_validation() -> None:
    sample = Sample()
    sample.set_code(150)

    assert sample.set_code(150) is False
    assert sample.get_errors("code") == ["code must be below 100"]

    assert sample.set_code(42) is True
    assert sample.get_errors("code") is None
    assert sample.has_errors() is False


def test_get_errors_returns_copy() -> None:
    sample = Sample()
    sample.add_error("code", "first")
    sample.add_error("code", "second")

    errors = sample.get_errors("code")
    errors.append("third")

    assert sample.get_errors("code") == ["first", "second"]
    assert sample.has_errors("code") is True
    assert sample.has_errors("name") is False


def test_clear_errors_for_unknown_field_is_noop() -> None:
    sample = Sample()
    sample.clear_errors("missing")
    assert sample.get_errors("missing") is None
