from linkshortener.collector.constants import Stack, Level, Package
from linkshortener.collector.forwarder import LogForwarder, InvalidLogEntryError, build_forwarder, build_payload, log


__all__ = [
    'Stack',
    'Level',
    'Package',
    'LogForwarder',
    'InvalidLogEntryError',
    'build_forwarder',
    'build_payload',
    'log',
]
