from __future__ import annotations

import argparse
import logging
import random
import sys
import threading

from senselink import (
    MessageKind,
    ReadingCollector,
    Senselink,
    SensingConfiguration,
    SensorData,
    SensorType,
    StartSensing,
    StartedSensing,
    StopSensing,
    StoppedSensing,
)
from senselink.payload import now

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    fmt = "%(asctime)s %(levelname)s %(filename)s:%(lineno)s %(name)s %(message)s"
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=fmt, stream=sys.stdout, force=True)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    p.add_argument("--codec", choices=["json", "msgpack"], default="json")
    p.add_argument("--mode", choices=["batch", "streaming"], default="batch")
    p.add_argument("--readings", type=int, default=20, help="Readings per sensor")
    p.add_argument("--batch-size", type=int, default=8)
    return p.parse_args()


def fake_reading(sensor: SensorType) -> SensorData:
    if sensor is SensorType.HEART_RATE:
        values = (random.uniform(55, 120),)
    else:
        values = tuple(random.uniform(-1, 1) for _ in range(3))
    return SensorData(sensor=sensor, values=values, time=now())


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    stopped = threading.Event()
    collector = None

    # Watch side
    def on_start(msg: StartSensing):
        nonlocal collector
        logger.info("watch: start %s (%s)", [s.name for s in msg.configuration], msg.transmission_mode)
        collector = ReadingCollector.for_message(msg, watch.send, batch_size=args.batch_size)
        watch.send(StartedSensing(start_time=now()))
        for _ in range(args.readings):
            for sensor in msg.configuration:
                collector(fake_reading(sensor))

    def on_stop(msg: StopSensing):
        if collector is not None:
            collector.flush()
        watch.send(StoppedSensing(stop_time=now()))

    # Host side
    def on_data(msg):
        logger.info("host: %d readings, first at %s", len(msg.readings), msg.readings[0].time.isoformat())

    watch = Senselink("watch", codec=args.codec, handlers={
        MessageKind.START_SENSING: on_start,
        MessageKind.STOP_SENSING:  on_stop,
    })
    host = Senselink("host", codec=args.codec, handlers={
        MessageKind.STARTED_SENSING: lambda m: logger.info("host: sensing started at %s", m.start_time.isoformat()),
        MessageKind.SENSING_DATA:    on_data,
        MessageKind.STOPPED_SENSING: lambda m: stopped.set(),
    })
    watch.transport.connect(host.transport)

    config = SensingConfiguration([SensorType.ACCELEROMETER, SensorType.HEART_RATE])
    host.send(StartSensing(config, transmission_mode=args.mode))
    host.send(StopSensing())

    if not stopped.wait(timeout=5):
        logger.error("no stopped-sensing message from the watch")
    watch.stop()
    host.stop()


if __name__ == "__main__":
    main()
