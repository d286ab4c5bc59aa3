import pytest

import senselink
from senselink import MalformedField, MessageKind, MessageParser, UnrecognizedMessageType

from conftest import at


def test_dispatch(messages):

    for message in messages:
        parsed = MessageParser.parse(message.encode())
        assert type(parsed) is type(message)
        assert parsed.kind is message.kind
        assert parsed == message


def test_parse_message_shortcut(messages):

    for message in messages:
        assert senselink.parse_message(message.encode()) == message


@pytest.mark.parametrize('tag', [5, 6, 99, -1, 2**40])
def test_unknown_tag(tag):

    payload = {'type': tag, 'ts': at(0)}

    with pytest.raises(UnrecognizedMessageType) as info:
        MessageParser.parse(payload)

    assert info.value.tag == tag


@pytest.mark.parametrize('tag', [None, '2', 2.0, True, [2]])
def test_wrongly_typed_tag(tag):

    payload = {'type': tag, 'ts': at(0)}

    with pytest.raises(UnrecognizedMessageType):
        MessageParser.parse(payload)


def test_missing_tag():

    with pytest.raises(UnrecognizedMessageType):
        MessageParser.parse({'ts': at(0)})

    with pytest.raises(UnrecognizedMessageType):
        MessageParser.parse({})


def test_not_a_mapping():

    with pytest.raises(UnrecognizedMessageType):
        MessageParser.parse(['type', 1])


def test_decode_failures_are_value_errors():

    assert issubclass(UnrecognizedMessageType, senselink.DecodeError)
    assert issubclass(MalformedField, senselink.DecodeError)
    assert issubclass(senselink.DecodeError, ValueError)


def test_variant_failure_propagates():

    payload = {'type': int(MessageKind.STARTED_SENSING), 'ts': at(0)}

    with pytest.raises(MalformedField) as info:
        MessageParser.parse(payload)

    assert info.value.key == 'startTime'
    assert 'missing' in str(info.value)


def test_variant_for():

    for kind in MessageKind:
        if kind is MessageKind.UNKNOWN:
            with pytest.raises(UnrecognizedMessageType):
                MessageParser.variant_for(kind)
        else:
            assert MessageParser.variant_for(kind).kind is kind

    with pytest.raises(UnrecognizedMessageType):
        MessageParser.variant_for(42)
