"""A scene that triggers a callback when activated."""

from __future__ import annotations

from collections.abc import Callable

from . import dictionary as d
from .serializer import Entity, FlagType, MqttContext, PropertyValueType, compare_data_topics

SceneCallback = Callable[["Scene"], None]


class Scene(Entity):
    """Adds a scene whose activation calls the registered callback."""

    def __init__(self, unique_id: str | None, context: MqttContext) -> None:
        super().__init__(d.COMPONENT_SCENE, unique_id, context)
        self.icon: str | None = None
        self.retain = False
        self._command_callback: SceneCallback | None = None

    def on_command(self, callback: SceneCallback | None) -> None:
        """Register the callback called with the scene when it is activated."""
        self._command_callback = callback

    def build_serializer(self) -> None:
        if self._serializer is not None or not self.unique_id:
            return
        serializer = self._create_serializer(7)
        serializer.set(d.NAME_PROPERTY, self.name)
        serializer.set(d.UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(d.ICON_PROPERTY, self.icon)
        if self.retain:
            serializer.set(d.RETAIN_PROPERTY, self.retain, PropertyValueType.BOOL)
        serializer.set(d.PAYLOAD_ON_PROPERTY, d.STATE_ON)
        serializer.set_flag(FlagType.WITH_AVAILABILITY)
        serializer.topic(d.COMMAND_TOPIC)

    def on_mqtt_connected(self) -> None:
        if not self.unique_id:
            return
        self.publish_config()
        self.publish_availability()
        self.subscribe_topic(d.COMMAND_TOPIC)

    def on_mqtt_message(self, topic: str, payload: bytes) -> None:
        if self._command_callback is None:
            return
        if compare_data_topics(self.context, topic, self.unique_id, d.COMMAND_TOPIC):
            self._command_callback(self)