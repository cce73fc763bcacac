# haentities

Building blocks for exposing a device to Home Assistant through MQTT discovery.
Each entity builds its discovery configuration as compact JSON, publishes its
state on data topics, subscribes to its command topics and hands incoming
commands to callbacks you register.

## Installation

```
pip install .
```

## Entities

- `Switch` (`haentities.switch`): an on/off switch with a command callback
  (`on_command`), `set_state`, `turn_on` and `turn_off`.
- `Sensor` (`haentities.sensor`): a textual sensor; every `set_value` call
  publishes a message.
- `SensorNumber` (`haentities.sensor_number`): a numeric sensor with a fixed
  precision; `set_value` only publishes when the value changes (or with
  `force=True`).
- `Scene` (`haentities.scene`): a scene that calls its callback when activated.
- `Number` (`haentities.number`): a slider or box (`NumberMode`) holding a
  numeric value, with `set_min`, `set_max`, `set_step` and a command callback
  that receives a `Numeric` (unset when Home Assistant sends `None`).

All of them derive from `Entity` in `haentities.serializer`. An entity has a
`name`, a `unique_id` and optional per-entity availability
(`set_availability`). Options such as `icon`, `retain`, `optimistic` or
`device_class` are plain attributes, read when the discovery configuration is
first built.

## The MQTT context

An `Entity` is tied to an `MqttContext`, which holds the device id, the
discovery prefix (default `homeassistant`), the data prefix (default `aha`),
an optional device JSON object, an optional shared availability topic and a
`connected` flag. Its `publish` and `subscribe` methods record every call in
`published` and `subscriptions`; subclass `MqttContext` and override them to
send messages through a real MQTT client.

## Example

```python
from haentities.serializer import MqttContext
from haentities.switch import Switch

def handle(state, sender):
    sender.set_state(state)

context = MqttContext(device_id="mydevice")
switch = Switch("relay", context)
switch.on_command(handle)
switch.on_mqtt_connected()

# context.published now holds the retained discovery config on
# homeassistant/switch/mydevice/relay/config and the state "OFF" on
# aha/mydevice/relay/stat_t; context.subscriptions holds
# aha/mydevice/relay/cmd_t.

switch.on_mqtt_message("aha/mydevice/relay/cmd_t", b"ON")
```

## Numbers

`haentities.numeric.Numeric` stores a number as an integer base value plus a
precision, the count of decimal digits. `Numeric.from_value(21.5, 1)` has base
value `215` and `to_str()` gives `"21.5"`. `Numeric.from_str(b"215")` parses a
base value, which is how numeric commands arrive from Home Assistant.

## Topics

- Configuration: `<discovery prefix>/<component>/<device id>/<object id>/config`
  (`config_topic`).
- Data: `<data prefix>/<device id>/<object id>/<topic>` (`data_topic`).
  `compare_data_topics` checks whether an incoming topic is one of them.

## Other helpers

- `haentities.serializer_array.SerializerArray`: a fixed-capacity list of
  strings rendered as a JSON array.
- `haentities.utils`: `ends_with` and `byte_array_to_str` (lowercase hex).
- `haentities.dictionary`: the property names, topic names and payload words
  used in the discovery JSON and messages.

## What the package does not do

- It has no MQTT client of its own: messages go wherever your `MqttContext`
  sends them, and you pass incoming messages to `on_mqtt_message` yourself.
- It has no lock or select entity.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```