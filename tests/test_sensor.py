import json

import pytest

from haentities import dictionary as d
from haentities.sensor import Sensor
from haentities.serializer import MqttContext, config_topic, data_topic


@pytest.fixture
def ctx():
    return MqttContext(device_id="testDevice", device_json='{"ids":"testDevice"}')


def test_set_value_publishes_every_time(ctx):
    sensor = Sensor("uid", ctx)
    assert sensor.set_value("hello") is True
    assert sensor.set_value("hello") is True
    expected = (data_topic(ctx, "uid", d.STATE_TOPIC), "hello", True)
    assert ctx.published == [expected, expected]


def test_set_value_fails_when_disconnected(ctx):
    ctx.connected = False
    sensor = Sensor("uid", ctx)
    assert sensor.set_value("hello") is False
    assert ctx.published == []


def test_set_value_without_unique_id(ctx):
    sensor = Sensor(None, ctx)
    assert sensor.set_value("hello") is False


def test_config_contents(ctx):
    sensor = Sensor("uid", ctx)
    sensor.name = "Temp"
    sensor.device_class = "temperature"
    sensor.unit_of_measurement = "C"
    sensor.force_update = True
    sensor.on_mqtt_connected()
    topic, payload, _ = ctx.published[0]
    assert topic == config_topic(ctx, d.COMPONENT_SENSOR, "uid")
    config = json.loads(payload)
    assert config[d.NAME_PROPERTY] == "Temp"
    assert config[d.DEVICE_CLASS_PROPERTY] == "temperature"
    assert config[d.UNIT_OF_MEASUREMENT_PROPERTY] == "C"
    assert config[d.FORCE_UPDATE_PROPERTY] is True
    assert config[d.STATE_TOPIC] == data_topic(ctx, "uid", d.STATE_TOPIC)
    assert d.COMMAND_TOPIC not in config


def test_default_config_omits_optional_properties(ctx):
    sensor = Sensor("uid", ctx)
    sensor.on_mqtt_connected()
    config = json.loads(ctx.published[0][1])
    assert d.FORCE_UPDATE_PROPERTY not in config
    assert d.ICON_PROPERTY not in config
    assert d.AVAILABILITY_TOPIC not in config


def test_availability_is_configured_and_published(ctx):
    sensor = Sensor("uid", ctx)
    sensor.availability = True
    sensor.on_mqtt_connected()
    config = json.loads(ctx.published[0][1])
    availability_topic = data_topic(ctx, "uid", d.AVAILABILITY_TOPIC)
    assert config[d.AVAILABILITY_TOPIC] == availability_topic
    assert ctx.published[1] == (availability_topic, d.ONLINE, True)


def test_connected_without_unique_id(ctx):
    sensor = Sensor(None, ctx)
    sensor.on_mqtt_connected()
    assert ctx.published == []