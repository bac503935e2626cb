'''
schema-driven fixture data for the listy test suites.

a schema is plain python data:
  - 'word'                          -> a faker provider called with no arguments
  - ('pyint', {'min_value': 1})     -> a faker provider called with kwargs
  - {'_qen_provider': 'choice', 'from': [...]}
  - {'_qen_provider': 'ints', 'length': (0, 20), 'low': -50, 'high': 50}
  - {'_qen_provider': 'literal', 'value': ...}
  - {'_qen_provider': 'ref', 'key': 'other_field'}
  - any other dict                  -> a record, fields generated in order
'''

import numpy as np
from faker import Faker
from listy import from_iterable, Seq
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # index into the options so values keep their python types
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]

        elif provider == "ints":
            low, high = config.get("length", (0, 20))
            length = int(self._rng.integers(low, high, endpoint=True))
            values = self._rng.integers(config.get("low", -100), config.get("high", 100),
                                        size=length, endpoint=True)
            return [int(v) for v in values]

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields can reference earlier siblings and anything in the parent context
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Seq:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def int_lists(count: int, seed: int, length=(0, 20), low: int = -50, high: int = 50) -> Seq:
    """count random int lists, for property style checks"""
    schema = {'_qen_provider': 'ints', 'length': length, 'low': low, 'high': high}
    return from_schema(schema, seed=seed).take(count)
