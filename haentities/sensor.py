"""A sensor that publishes textual values."""

from __future__ import annotations

from . import dictionary as d
from .serializer import Entity, FlagType, MqttContext, PropertyValueType


class Sensor(Entity):
    """Publishes string values; every call to :meth:`set_value` sends a message."""

    def __init__(self, unique_id: str | None, context: MqttContext) -> None:
        super().__init__(d.COMPONENT_SENSOR, unique_id, context)
        self.device_class: str | None = None
        self.force_update = False
        self.icon: str | None = None
        self.unit_of_measurement: str | None = None

    def set_value(self, value: str) -> bool:
        """Publish the value; return True on success."""
        return self.publish_on_data_topic(d.STATE_TOPIC, value, True)

    def build_serializer(self) -> None:
        if self._serializer is not None or not self.unique_id:
            return
        serializer = self._create_serializer(9)
        serializer.set(d.NAME_PROPERTY, self.name)
        serializer.set(d.UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(d.DEVICE_CLASS_PROPERTY, self.device_class)
        serializer.set(d.ICON_PROPERTY, self.icon)
        serializer.set(d.UNIT_OF_MEASUREMENT_PROPERTY, self.unit_of_measurement)
        if self.force_update:
            serializer.set(d.FORCE_UPDATE_PROPERTY, self.force_update, PropertyValueType.BOOL)
        serializer.set_flag(FlagType.WITH_DEVICE)
        serializer.set_flag(FlagType.WITH_AVAILABILITY)
        serializer.topic(d.STATE_TOPIC)

    def on_mqtt_connected(self) -> None:
        if not self.unique_id:
            return
        self.publish_config()
        self.publish_availability()