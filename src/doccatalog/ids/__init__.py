"""Identifier generators."""

from doccatalog.ids.generators import CounterIdGenerator, UuidIdGenerator, get_id_generator

__all__ = ["UuidIdGenerator", "CounterIdGenerator", "get_id_generator"]
