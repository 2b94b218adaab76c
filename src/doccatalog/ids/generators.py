"""Identifier generators for document records."""

import itertools
import uuid

from doccatalog.protocols import IdGenerator


class UuidIdGenerator:
    """Random identifiers (uuid4, hex form)."""

    strategy = "uuid"

    def new_id(self) -> str:
        return uuid.uuid4().hex


class CounterIdGenerator:
    """Monotonic identifiers: ``doc-1``, ``doc-2``, ...

    Deterministic, so handy for tests and scripted sessions.
    """

    strategy = "counter"

    def __init__(self, prefix: str = "doc-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


def get_id_generator(strategy: str) -> IdGenerator:
    """Build the generator for a configured strategy name.

    Args:
        strategy: "uuid" or "counter"

    Raises:
        ValueError: for an unknown strategy
    """
    if strategy == UuidIdGenerator.strategy:
        return UuidIdGenerator()
    if strategy == CounterIdGenerator.strategy:
        return CounterIdGenerator()
    raise ValueError(f"Unknown id strategy: {strategy!r}")
