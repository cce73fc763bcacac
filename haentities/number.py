"""A numeric value controlled from a slider or a box in Home Assistant."""

from __future__ import annotations

import enum
from collections.abc import Callable

from . import dictionary as d
from .numeric import Numeric
from .serializer import Entity, FlagType, MqttContext, PropertyValueType, compare_data_topics


class NumberMode(enum.Enum):
    """How the number is displayed in the panel."""

    AUTO = 0
    BOX = 1
    SLIDER = 2


NumberCallback = Callable[[Numeric, "Number"], None]

_MODE_TEXT = {NumberMode.BOX: d.MODE_BOX, NumberMode.SLIDER: d.MODE_SLIDER}
_COMMAND_TEMPLATES = {
    1: d.VALUE_TEMPLATE_FLOAT_P1,
    2: d.VALUE_TEMPLATE_FLOAT_P2,
    3: d.VALUE_TEMPLATE_FLOAT_P3,
}


class Number(Entity):
    """A number whose state, limits and step share one precision."""

    def __init__(
        self, unique_id: str | None, context: MqttContext, precision: int = 0
    ) -> None:
        super().__init__(d.COMPONENT_NUMBER, unique_id, context)
        self.precision = precision
        self.device_class: str | None = None
        self.icon: str | None = None
        self.retain = False
        self.optimistic = False
        self.mode = NumberMode.AUTO
        self.unit_of_measurement: str | None = None
        self._min_value = Numeric()
        self._max_value = Numeric()
        self._step = Numeric()
        self._current_state = Numeric()
        self._command_callback: NumberCallback | None = None

    @property
    def current_state(self) -> Numeric:
        """The last known state; unset until a state is given."""
        return self._current_state

    @property
    def min_value(self) -> Numeric:
        return self._min_value

    @property
    def max_value(self) -> Numeric:
        return self._max_value

    @property
    def step(self) -> Numeric:
        return self._step

    def _as_numeric(self, value: Numeric | int | float) -> Numeric:
        if isinstance(value, Numeric):
            return value
        return Numeric.from_value(value, self.precision)

    def set_state(self, state: Numeric | int | float, force: bool = False) -> bool:
        """Publish a new state unless it equals the last known one.

        Returns True when the state is unchanged or has been published.
        """
        number = self._as_numeric(state)
        if not force and number == self._current_state:
            return True
        if self._publish_state(number):
            self._current_state = number
            return True
        return False

    def set_current_state(self, state: Numeric | int | float) -> None:
        """Store the state without publishing it; other precisions are ignored."""
        number = self._as_numeric(state)
        if number.precision == self.precision:
            self._current_state = number

    def set_min(self, value: float) -> None:
        """Set the smallest value that can be chosen in the panel."""
        self._min_value = Numeric.from_value(float(value), self.precision)

    def set_max(self, value: float) -> None:
        """Set the largest value that can be chosen in the panel."""
        self._max_value = Numeric.from_value(float(value), self.precision)

    def set_step(self, value: float) -> None:
        """Set the step of the slider's movement."""
        self._step = Numeric.from_value(float(value), self.precision)

    def on_command(self, callback: NumberCallback | None) -> None:
        """Register the callback called with the commanded number and the entity."""
        self._command_callback = callback

    def build_serializer(self) -> None:
        if self._serializer is not None or not self.unique_id:
            return
        serializer = self._create_serializer(15)
        serializer.set(d.NAME_PROPERTY, self.name)
        serializer.set(d.UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(d.DEVICE_CLASS_PROPERTY, self.device_class)
        serializer.set(d.ICON_PROPERTY, self.icon)
        serializer.set(d.UNIT_OF_MEASUREMENT_PROPERTY, self.unit_of_measurement)
        serializer.set(d.MODE_PROPERTY, _MODE_TEXT.get(self.mode))
        serializer.set(d.COMMAND_TEMPLATE_PROPERTY, _COMMAND_TEMPLATES.get(self.precision))
        for name, number in (
            (d.MIN_PROPERTY, self._min_value),
            (d.MAX_PROPERTY, self._max_value),
            (d.STEP_PROPERTY, self._step),
        ):
            if number.is_set():
                serializer.set(name, number, PropertyValueType.NUMBER)
        if self.retain:
            serializer.set(d.RETAIN_PROPERTY, self.retain, PropertyValueType.BOOL)
        if self.optimistic:
            serializer.set(d.OPTIMISTIC_PROPERTY, self.optimistic, PropertyValueType.BOOL)
        serializer.set_flag(FlagType.WITH_DEVICE)
        serializer.set_flag(FlagType.WITH_AVAILABILITY)
        serializer.topic(d.STATE_TOPIC)
        serializer.topic(d.COMMAND_TOPIC)

    def on_mqtt_connected(self) -> None:
        if not self.unique_id:
            return
        self.publish_config()
        self.publish_availability()
        if not self.retain:
            self._publish_state(self._current_state)
        self.subscribe_topic(d.COMMAND_TOPIC)

    def on_mqtt_message(self, topic: str, payload: bytes) -> None:
        if compare_data_topics(self.context, topic, self.unique_id, d.COMMAND_TOPIC):
            self._handle_command(bytes(payload))

    def _publish_state(self, state: Numeric) -> bool:
        text = state.to_str() if state.is_set() else d.STATE_NONE
        return self.publish_on_data_topic(d.STATE_TOPIC, text, True)

    def _handle_command(self, payload: bytes) -> None:
        if self._command_callback is None:
            return
        none_word = d.STATE_NONE.encode()
        if len(payload) <= len(none_word) and none_word[: len(payload)] == payload:
            self._command_callback(Numeric(), self)
            return
        number = Numeric.from_str(payload)
        if number.is_set():
            number.precision = self.precision
            self._command_callback(number, self)