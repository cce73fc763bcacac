"""A sensor that publishes fixed-point numbers."""

from __future__ import annotations

from .numeric import Numeric
from . import dictionary as d
from .sensor import Sensor
from .serializer import MqttContext


class SensorNumber(Sensor):
    """A sensor whose values are numbers of a fixed precision."""

    def __init__(
        self, unique_id: str | None, context: MqttContext, precision: int = 0
    ) -> None:
        super().__init__(unique_id, context)
        self.precision = precision
        self._current_value = Numeric()

    @property
    def current_value(self) -> Numeric:
        """The last known value; unset until a value is given."""
        return self._current_value

    def _as_numeric(self, value: Numeric | int | float) -> Numeric:
        if isinstance(value, Numeric):
            return value
        return Numeric.from_value(value, self.precision)

    def set_value(self, value: Numeric | int | float, force: bool = False) -> bool:  # type: ignore[override]
        """Publish a new value unless it equals the last known one.

        A numeric of another precision than the sensor's is rejected with False.
        """
        number = self._as_numeric(value)
        if number.precision != self.precision:
            return False
        if not force and number == self._current_value:
            return True
        if self._publish_value(number):
            self._current_value = number
            return True
        return False

    def set_current_value(self, value: Numeric | int | float) -> None:
        """Store the value without publishing it; other precisions are ignored."""
        number = self._as_numeric(value)
        if number.precision == self.precision:
            self._current_value = number

    def on_mqtt_connected(self) -> None:
        if not self.unique_id:
            return
        super().on_mqtt_connected()
        self._publish_value(self._current_value)

    def _publish_value(self, value: Numeric) -> bool:
        if not value.is_set():
            return False
        return self.publish_on_data_topic(d.STATE_TOPIC, value.to_str(), True)