import json

import pytest

from haentities import dictionary as d
from haentities.serializer import MqttContext, config_topic, data_topic
from haentities.switch import Switch


@pytest.fixture
def ctx():
    return MqttContext(device_id="testDevice", device_json='{"ids":"testDevice"}')


def test_set_state_publishes_on(ctx):
    switch = Switch("uid", ctx)
    assert switch.set_state(True) is True
    assert ctx.published == [(data_topic(ctx, "uid", d.STATE_TOPIC), d.STATE_ON, True)]
    assert switch.current_state is True


def test_same_state_is_not_published(ctx):
    switch = Switch("uid", ctx)
    assert switch.set_state(False) is True
    assert ctx.published == []


def test_force_publishes_same_state(ctx):
    switch = Switch("uid", ctx)
    assert switch.set_state(False, force=True) is True
    assert ctx.published == [(data_topic(ctx, "uid", d.STATE_TOPIC), d.STATE_OFF, True)]


def test_turn_on_and_off(ctx):
    switch = Switch("uid", ctx)
    switch.turn_on()
    switch.turn_off()
    assert [payload for _, payload, _ in ctx.published] == [d.STATE_ON, d.STATE_OFF]
    assert switch.current_state is False


def test_failed_publish_keeps_state(ctx):
    ctx.connected = False
    switch = Switch("uid", ctx)
    assert switch.set_state(True) is False
    assert switch.current_state is False


def test_config_contents(ctx):
    switch = Switch("uid", ctx)
    switch.icon = "mdi:home"
    switch.retain = True
    switch.on_mqtt_connected()
    topic, payload, retain = ctx.published[0]
    assert topic == config_topic(ctx, d.COMPONENT_SWITCH, "uid")
    assert retain is True
    config = json.loads(payload)
    assert config[d.UNIQUE_ID_PROPERTY] == "uid"
    assert config[d.ICON_PROPERTY] == "mdi:home"
    assert config[d.RETAIN_PROPERTY] is True
    assert d.OPTIMISTIC_PROPERTY not in config
    assert config[d.DEVICE_PROPERTY] == {"ids": "testDevice"}
    assert config[d.STATE_TOPIC] == data_topic(ctx, "uid", d.STATE_TOPIC)
    assert config[d.COMMAND_TOPIC] == data_topic(ctx, "uid", d.COMMAND_TOPIC)


def test_connected_publishes_state_and_subscribes(ctx):
    switch = Switch("uid", ctx)
    switch.current_state = True
    switch.on_mqtt_connected()
    assert ctx.published[-1] == (data_topic(ctx, "uid", d.STATE_TOPIC), d.STATE_ON, True)
    assert ctx.subscriptions == [data_topic(ctx, "uid", d.COMMAND_TOPIC)]


def test_retained_switch_skips_state_on_connect(ctx):
    switch = Switch("uid", ctx)
    switch.retain = True
    switch.on_mqtt_connected()
    assert len(ctx.published) == 1


def test_without_unique_id_nothing_happens(ctx):
    switch = Switch(None, ctx)
    switch.on_mqtt_connected()
    assert ctx.published == []
    assert ctx.subscriptions == []


@pytest.mark.parametrize("payload,expected", [(b"ON", True), (b"OFF", False)])
def test_command_callback(ctx, payload, expected):
    switch = Switch("uid", ctx)
    calls = []
    switch.on_command(lambda state, sender: calls.append((state, sender)))
    switch.on_mqtt_message(data_topic(ctx, "uid", d.COMMAND_TOPIC), payload)
    assert calls == [(expected, switch)]


def test_command_on_other_topic_is_ignored(ctx):
    switch = Switch("uid", ctx)
    calls = []
    switch.on_command(lambda state, sender: calls.append(state))
    switch.on_mqtt_message(data_topic(ctx, "other", d.COMMAND_TOPIC), b"ON")
    assert calls == []