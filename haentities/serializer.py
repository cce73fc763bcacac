"""Discovery JSON serialization, MQTT topic naming and the base entity."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from . import dictionary as d
from .numeric import Numeric
from .serializer_array import SerializerArray


@dataclass
class MqttContext:
    """The MQTT session an entity publishes through.

    ``published`` and ``subscriptions`` record every successful call; a subclass
    may override :meth:`publish` and :meth:`subscribe` to use a real transport.
    """

    device_id: str
    discovery_prefix: str = "homeassistant"
    data_prefix: str = "aha"
    device_json: str | None = None
    availability_topic: str | None = None
    connected: bool = True
    published: list[tuple[str, str, bool]] = field(default_factory=list)
    subscriptions: list[str] = field(default_factory=list)

    @property
    def shared_availability(self) -> bool:
        """True when the device reports availability for all its entities."""
        return self.availability_topic is not None

    def publish(self, topic: str, payload: str, retain: bool = False) -> bool:
        """Publish a message; return False when not connected."""
        if not self.connected:
            return False
        self.published.append((topic, payload, retain))
        return True

    def subscribe(self, topic: str) -> bool:
        """Subscribe to a topic; return False when not connected."""
        if not self.connected:
            return False
        self.subscriptions.append(topic)
        return True


class FlagType(enum.Enum):
    WITH_DEVICE = 1
    WITH_AVAILABILITY = 2


class PropertyValueType(enum.Enum):
    STRING = 1
    BOOL = 2
    NUMBER = 3
    ARRAY = 4


class _EntryKind(enum.Enum):
    PROPERTY = 1
    TOPIC = 2
    FLAG = 3


@dataclass
class _Entry:
    kind: _EntryKind
    name: str | None = None
    value: Any = None
    value_type: PropertyValueType | None = None
    flag: FlagType | None = None


def config_topic(context: MqttContext, component: str, object_id: str) -> str:
    """Return ``[discovery prefix]/[component]/[device id]/[object id]/config``."""
    if not component or not object_id:
        raise ValueError("component and object id are required")
    return d.SERIALIZER_SLASH.join(
        (context.discovery_prefix, component, context.device_id, object_id, d.CONFIG_TOPIC)
    )


def data_topic(context: MqttContext, object_id: str | None, topic: str) -> str:
    """Return ``[data prefix]/[device id]/[object id]/[topic]``; the object id is optional."""
    if not topic:
        raise ValueError("topic is required")
    parts = [context.data_prefix, context.device_id]
    if object_id:
        parts.append(object_id)
    parts.append(topic)
    return d.SERIALIZER_SLASH.join(parts)


def compare_data_topics(
    context: MqttContext, actual_topic: str | None, object_id: str | None, topic: str
) -> bool:
    """Return True if ``actual_topic`` is exactly the data topic for the object."""
    if actual_topic is None:
        return False
    return actual_topic == data_topic(context, object_id, topic)


class Serializer:
    """Collects the entries of an entity's discovery JSON object."""

    def __init__(
        self, context: MqttContext, unique_id: str | None, max_entries: int
    ) -> None:
        self.context = context
        self.unique_id = unique_id
        self.max_entries = max_entries
        self.availability_configured = False
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def _add(self, entry: _Entry) -> None:
        if len(self._entries) >= self.max_entries:
            raise OverflowError(f"serializer holds at most {self.max_entries} entries")
        self._entries.append(entry)

    def set(
        self,
        name: str | None,
        value: Any,
        value_type: PropertyValueType = PropertyValueType.STRING,
    ) -> None:
        """Add a property; a missing name or value is ignored."""
        if not name or value is None:
            return
        self._add(_Entry(_EntryKind.PROPERTY, name, value, value_type))

    def set_flag(self, flag: FlagType) -> None:
        """Add the device object or the availability topic."""
        if flag is FlagType.WITH_DEVICE:
            self._add(_Entry(_EntryKind.FLAG, flag=flag))
        elif flag is FlagType.WITH_AVAILABILITY:
            shared = self.context.shared_availability
            if not shared and not self.availability_configured:
                return
            value = self.context.availability_topic if shared else None
            self._add(_Entry(_EntryKind.TOPIC, d.AVAILABILITY_TOPIC, value))

    def topic(self, topic: str | None) -> None:
        """Add a data topic of the entity under the given property name."""
        if not self.unique_id or not topic:
            return
        self._add(_Entry(_EntryKind.TOPIC, topic))

    def _value_text(self, entry: _Entry) -> str | None:
        value = entry.value
        if entry.value_type is PropertyValueType.STRING:
            return f"{d.JSON_ESCAPE_CHAR}{value}{d.JSON_ESCAPE_CHAR}"
        if entry.value_type is PropertyValueType.BOOL:
            return d.TRUE if value else d.FALSE
        if entry.value_type is PropertyValueType.NUMBER:
            number: Numeric = value
            return number.to_str()
        if entry.value_type is PropertyValueType.ARRAY:
            array: SerializerArray = value
            return array.serialize()
        return None

    @staticmethod
    def _key(name: str) -> str:
        return f"{d.JSON_PROPERTY_PREFIX}{name}{d.JSON_PROPERTY_SUFFIX}"

    def _entry_text(self, entry: _Entry) -> str | None:
        if entry.kind is _EntryKind.PROPERTY:
            value = self._value_text(entry)
            return None if value is None else self._key(entry.name) + value
        if entry.kind is _EntryKind.TOPIC:
            if entry.value is not None:
                topic = entry.value
            elif self.unique_id:
                topic = data_topic(self.context, self.unique_id, entry.name)
            else:
                return None
            return f"{self._key(entry.name)}{d.JSON_ESCAPE_CHAR}{topic}{d.JSON_ESCAPE_CHAR}"
        if entry.kind is _EntryKind.FLAG and entry.flag is FlagType.WITH_DEVICE:
            if self.context.device_json is None:
                return None
            return self._key(d.DEVICE_PROPERTY) + self.context.device_json
        return None

    def calculate_size(self) -> int:
        """Return the expected length of the serialized object."""
        size = len(d.JSON_DATA_PREFIX) + len(d.JSON_DATA_SUFFIX)
        for index, entry in enumerate(self._entries):
            text = self._entry_text(entry)
            if not text:
                continue
            size += len(text)
            if index > 0:
                size += len(d.JSON_PROPERTIES_SEPARATOR)
        return size

    def serialize(self) -> str:
        """Return the JSON object; raise ValueError if an entry cannot be rendered."""
        parts = []
        for entry in self._entries:
            text = self._entry_text(entry)
            if text is None:
                raise ValueError(f"cannot serialize entry {entry.name or entry.flag}")
            parts.append(text)
        body = d.JSON_PROPERTIES_SEPARATOR.join(parts)
        return f"{d.JSON_DATA_PREFIX}{body}{d.JSON_DATA_SUFFIX}"


class Entity:
    """Base of all Home Assistant entities published over MQTT."""

    def __init__(self, component: str, unique_id: str | None, context: MqttContext) -> None:
        self.component = component
        self.unique_id = unique_id
        self.context = context
        self.name: str | None = None
        self.availability: bool | None = None
        self._serializer: Serializer | None = None

    @property
    def availability_configured(self) -> bool:
        return self.availability is not None

    def _create_serializer(self, max_entries: int) -> Serializer:
        serializer = Serializer(self.context, self.unique_id, max_entries)
        serializer.availability_configured = self.availability_configured
        self._serializer = serializer
        return serializer

    def publish_on_data_topic(self, topic: str, payload: str, retain: bool = False) -> bool:
        """Publish the payload on one of the entity's data topics."""
        if not self.unique_id or payload is None:
            return False
        return self.context.publish(
            data_topic(self.context, self.unique_id, topic), payload, retain
        )

    def subscribe_topic(self, topic: str) -> bool:
        """Subscribe to one of the entity's data topics."""
        if not self.unique_id:
            return False
        return self.context.subscribe(data_topic(self.context, self.unique_id, topic))

    def set_availability(self, online: bool) -> bool:
        """Set the entity's own availability and publish it."""
        self.availability = online
        return self.publish_availability()

    def publish_availability(self) -> bool:
        """Publish the entity's availability unless the device shares one."""
        if self.context.shared_availability or self.availability is None:
            return False
        return self.publish_on_data_topic(
            d.AVAILABILITY_TOPIC, d.ONLINE if self.availability else d.OFFLINE, True
        )

    def build_serializer(self) -> None:
        """Prepare the discovery serializer; subclasses add their own entries."""
        if self._serializer is not None or not self.unique_id:
            return
        serializer = self._create_serializer(4)
        serializer.set(d.NAME_PROPERTY, self.name)
        serializer.set(d.UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set_flag(FlagType.WITH_DEVICE)
        serializer.set_flag(FlagType.WITH_AVAILABILITY)

    def publish_config(self) -> bool:
        """Publish the retained discovery configuration."""
        self.build_serializer()
        if self._serializer is None or not self.unique_id:
            return False
        return self.context.publish(
            config_topic(self.context, self.component, self.unique_id),
            self._serializer.serialize(),
            True,
        )

    def on_mqtt_connected(self) -> None:
        """Publish configuration and availability after connecting."""
        if not self.unique_id:
            return
        self.publish_config()
        self.publish_availability()

    def on_mqtt_message(self, topic: str, payload: bytes) -> None:
        """Handle an incoming message; the base entity accepts no commands."""
        return None