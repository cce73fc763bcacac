import pytest

from haentities import dictionary as d
from haentities.numeric import Numeric
from haentities.sensor_number import SensorNumber
from haentities.serializer import MqttContext, config_topic, data_topic


@pytest.fixture
def ctx():
    return MqttContext(device_id="testDevice", device_json='{"ids":"testDevice"}')


def test_set_integer_value(ctx):
    sensor = SensorNumber("uid", ctx)
    assert sensor.set_value(42) is True
    assert ctx.published == [(data_topic(ctx, "uid", d.STATE_TOPIC), "42", True)]
    assert sensor.current_value == Numeric(42, 0)


def test_set_float_value_with_precision(ctx):
    sensor = SensorNumber("uid", ctx, precision=1)
    assert sensor.set_value(12.5) is True
    assert ctx.published[-1][1] == "12.5"
    assert sensor.current_value == Numeric(125, 1)


def test_precision_mismatch_is_rejected(ctx):
    sensor = SensorNumber("uid", ctx)
    assert sensor.set_value(Numeric.from_value(5, 1)) is False
    assert ctx.published == []
    assert sensor.current_value.is_set() is False


def test_same_value_is_not_republished(ctx):
    sensor = SensorNumber("uid", ctx)
    sensor.set_value(7)
    assert sensor.set_value(7) is True
    assert len(ctx.published) == 1
    assert sensor.set_value(7, force=True) is True
    assert len(ctx.published) == 2


def test_failed_publish_keeps_value(ctx):
    ctx.connected = False
    sensor = SensorNumber("uid", ctx)
    assert sensor.set_value(3) is False
    assert sensor.current_value.is_set() is False


def test_set_current_value_does_not_publish(ctx):
    sensor = SensorNumber("uid", ctx, precision=2)
    sensor.set_current_value(1.25)
    assert ctx.published == []
    assert sensor.current_value == Numeric.from_value(1.25, 2)


def test_set_current_value_ignores_other_precision(ctx):
    sensor = SensorNumber("uid", ctx, precision=2)
    sensor.set_current_value(Numeric(5, 0))
    assert sensor.current_value.is_set() is False


def test_connected_publishes_current_value(ctx):
    sensor = SensorNumber("uid", ctx)
    sensor.set_current_value(-15)
    sensor.on_mqtt_connected()
    assert ctx.published[0][0] == config_topic(ctx, d.COMPONENT_SENSOR, "uid")
    assert ctx.published[-1] == (data_topic(ctx, "uid", d.STATE_TOPIC), "-15", True)


def test_connected_without_value_publishes_only_config(ctx):
    sensor = SensorNumber("uid", ctx)
    sensor.on_mqtt_connected()
    assert [topic for topic, _, _ in ctx.published] == [
        config_topic(ctx, d.COMPONENT_SENSOR, "uid")
    ]