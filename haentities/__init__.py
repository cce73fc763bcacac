"""Home Assistant MQTT discovery entities (switch, sensors, scene, number) and serialization helpers."""

__version__ = "0.1.0"

__all__ = [
    "dictionary",
    "serializer_array",
    "utils",
    "numeric",
    "serializer",
    "switch",
    "sensor",
    "sensor_number",
    "scene",
    "number",
]