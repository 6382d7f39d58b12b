"""Work-time engine package.

Feature modules (timestamps, sessions, durations, daily, periods, ...) form a
pure pipeline from raw attendance events to period aggregates. Only the
report service and the MySQL adapter touch the event store.
"""
