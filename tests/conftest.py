import pytest
from datetime import datetime, timedelta, timezone

import senselink
from senselink import SensorData, SensorType


T0 = datetime(2017, 3, 2, 12, 0, 0, 123456, tzinfo=timezone.utc)


def at(seconds):
    return T0 + timedelta(seconds=seconds)


@pytest.fixture
def readings():
    return (
        SensorData(SensorType.ACCELEROMETER, (0.1, -0.2, 0.98), at(1)),
        SensorData(SensorType.HEART_RATE, (72.0,), at(2)),
        SensorData(SensorType.GYROSCOPE, (1.5, 0.0, -3.25), at(3)),
    )


@pytest.fixture
def messages(readings):
    """ One instance of every variant.
    """

    config = senselink.SensingConfiguration([SensorType.HEART_RATE, SensorType.ACCELEROMETER])

    return (
        senselink.StartSensing(config, senselink.TransmissionMode.STREAMING, timestamp=at(0)),
        senselink.StopSensing(timestamp=at(10)),
        senselink.SensingData(readings=readings, timestamp=at(4)),
        senselink.StartedSensing(start_time=at(1), timestamp=at(1)),
        senselink.StoppedSensing(stop_time=at(9), timestamp=at(10)),
    )
