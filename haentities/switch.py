"""An on/off switch that receives commands from Home Assistant."""

from __future__ import annotations

from collections.abc import Callable

from . import dictionary as d
from .serializer import Entity, FlagType, MqttContext, PropertyValueType, compare_data_topics

SwitchCallback = Callable[[bool, "Switch"], None]


class Switch(Entity):
    """Displays an on/off switch in the panel and reports its state."""

    def __init__(self, unique_id: str | None, context: MqttContext) -> None:
        super().__init__(d.COMPONENT_SWITCH, unique_id, context)
        self.device_class: str | None = None
        self.icon: str | None = None
        self.retain = False
        self.optimistic = False
        self.current_state = False
        self._command_callback: SwitchCallback | None = None

    def set_state(self, state: bool, force: bool = False) -> bool:
        """Publish a new state unless it equals the last known one.

        Returns True when the state is unchanged or has been published.
        """
        if not force and state == self.current_state:
            return True
        if self._publish_state(state):
            self.current_state = state
            return True
        return False

    def turn_on(self) -> bool:
        return self.set_state(True)

    def turn_off(self) -> bool:
        return self.set_state(False)

    def on_command(self, callback: SwitchCallback | None) -> None:
        """Register the callback called with the commanded state and the switch."""
        self._command_callback = callback

    def build_serializer(self) -> None:
        if self._serializer is not None or not self.unique_id:
            return
        serializer = self._create_serializer(10)
        serializer.set(d.NAME_PROPERTY, self.name)
        serializer.set(d.UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(d.DEVICE_CLASS_PROPERTY, self.device_class)
        serializer.set(d.ICON_PROPERTY, self.icon)
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
            self._publish_state(self.current_state)
        self.subscribe_topic(d.COMMAND_TOPIC)

    def on_mqtt_message(self, topic: str, payload: bytes) -> None:
        if self._command_callback is None:
            return
        if compare_data_topics(self.context, topic, self.unique_id, d.COMMAND_TOPIC):
            state = len(payload) == len(d.STATE_ON)
            self._command_callback(state, self)

    def _publish_state(self, state: bool) -> bool:
        return self.publish_on_data_topic(
            d.STATE_TOPIC, d.STATE_ON if state else d.STATE_OFF, True
        )