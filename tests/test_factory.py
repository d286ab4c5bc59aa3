import pytest
import threading

from senselink import Endpoint, MessageKind, Senselink, StoppedSensing
from senselink.codecs import MsgPackCodec
from senselink.transports.loopback import LoopbackTransport

from conftest import at


def test_loopback_pair():

    stopped = threading.Event()

    watch = Senselink('watch', codec='msgpack')
    host = Senselink('host', codec='msgpack', handlers={
        MessageKind.STOPPED_SENSING: lambda m: stopped.set(),
    })

    try:
        assert isinstance(watch, Endpoint)
        assert watch.name == 'watch'
        assert isinstance(watch.transport.codec, MsgPackCodec)
        assert watch.transport.running

        watch.transport.connect(host.transport)
        watch.send(StoppedSensing(stop_time=at(0)))

        assert stopped.wait(timeout=2)
    finally:
        watch.stop()
        host.stop()


def test_transport_instance_passes_through():

    transport = LoopbackTransport('custom')
    endpoint = Senselink('custom', transport=transport, auto_start=False)

    assert endpoint.transport is transport
    assert not transport.running


def test_unknown_labels():

    with pytest.raises(ValueError):
        Senselink('x', transport='bluetooth')

    with pytest.raises(ValueError):
        Senselink('x', codec='xml')
