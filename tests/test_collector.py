import pytest
import threading

from senselink import (
    ReadingCollector,
    SensingData,
    SensorData,
    SensorType,
    StartSensing,
    TransmissionMode,
)

from conftest import at


def reading(n):
    return SensorData(SensorType.HEART_RATE, (60.0 + n,), at(n))


def test_streaming_sends_each_reading():

    sent = list()
    collector = ReadingCollector(sent.append, mode=TransmissionMode.STREAMING)

    for n in range(3):
        collector(reading(n))

    assert len(sent) == 3
    assert all(isinstance(m, SensingData) for m in sent)
    assert [m.readings for m in sent] == [(reading(0),), (reading(1),), (reading(2),)]
    assert collector.pending == 0


def test_batch_holds_until_full():

    sent = list()
    collector = ReadingCollector(sent.append, batch_size=3)

    collector(reading(0))
    collector(reading(1))
    assert sent == []
    assert collector.pending == 2

    collector(reading(2))
    collector(reading(3))

    assert len(sent) == 1
    assert sent[0].readings == (reading(0), reading(1), reading(2))
    assert collector.pending == 1

    collector.flush()
    assert len(sent) == 2
    assert sent[1].readings == (reading(3),)


def test_flush_with_nothing_buffered():

    sent = list()
    collector = ReadingCollector(sent.append)
    collector.flush()

    assert sent == []


def test_for_message():

    sent = list()
    start = StartSensing([SensorType.HEART_RATE], TransmissionMode.STREAMING)

    collector = ReadingCollector.for_message(start, sent.append)
    assert collector.mode is TransmissionMode.STREAMING

    collector = ReadingCollector.for_message(StartSensing([SensorType.HEART_RATE]), sent.append, batch_size=5)
    assert collector.mode is TransmissionMode.BATCH
    assert collector.batch_size == 5


def test_bad_batch_size():

    with pytest.raises(ValueError):
        ReadingCollector(print, batch_size=0)


def test_concurrent_readings_are_not_lost():

    sent = list()
    lock = threading.Lock()

    def send(message):
        with lock:
            sent.append(message)

    collector = ReadingCollector(send, batch_size=7)

    def feed():
        for n in range(100):
            collector(reading(n))

    threads = [threading.Thread(target=feed) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    collector.flush()

    assert sum(len(m.readings) for m in sent) == 400
