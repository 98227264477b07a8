"""
fixture data for the seqy test suites.

a schema is a nested python value:
  - a str naming a faker provider ('name', 'word', ...) or a literal string
  - a (provider, kwargs) tuple for faker providers that take arguments
  - {'_dgen': 'choice', 'from': [...]} picks one of the options
  - {'_dgen': 'literal', 'value': x} always produces x
  - a dict of fields, each generated in turn
"""
import numpy as np
from faker import Faker
from typing import Any, Dict, Optional

from seqy import from_iterable, SequenceAdapter


class RecordGenerator:
    """turns a schema into concrete records, reproducibly when seeded."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_provider(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            provider = getattr(self._fake, name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{name}'")
        return provider(**(kwargs or {}))

    def _directive(self, config: Dict) -> Any:
        kind = config["_dgen"]
        if kind == "choice":
            options = config["from"]
            # index into the options so native python values come back, not numpy scalars
            return options[int(self._rng.integers(len(options)))]
        if kind == "literal":
            if "value" not in config:
                raise ValueError("'literal' directive requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _dgen directive: '{kind}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_dgen" in schema:
                return self._directive(schema)
            return {field: self.create(sub_schema) for field, sub_schema in schema.items()}

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_provider(schema[0], schema[1])

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_provider(schema)
            return schema  # literal string

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = RecordGenerator(seed)

    def take(self, count: int) -> SequenceAdapter:
        """generate count records once and wrap them"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
