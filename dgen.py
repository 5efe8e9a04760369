'''
dgen: schema-driven fake records for exercising enumerables.

a schema is plain python data:
  - 'word'                                  -> faker provider called with no arguments
  - ('pyint', {'min_value': 1})             -> faker provider called with keyword arguments
  - {'_gen': 'choice', 'from': [...]}       -> one of the listed values
  - {'_gen': 'literal', 'value': x}         -> x as is
  - {'_gen': 'ref', 'key': 'name'}          -> a value generated earlier in the same record
  - [{'_gen_items': schema, '_gen_count': n}] -> a list of n items (n may be a (low, high) pair)
  - {'field': schema, ...}                  -> a record built field by field
anything else is returned literally.
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, Optional
from enumixin import EnumerableList, from_iterable

_DEFAULT_COUNT = 5


class Generator:
    """interprets a schema into concrete values."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_provider(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def _directive(self, config: Dict, context: Dict) -> Any:
        kind = config['_gen']
        if kind == 'choice':
            options = config['from']
            # index into the list so native python values come back, not numpy scalars
            return options[int(self._rng.integers(0, len(options)))]
        if kind == 'literal':
            if 'value' not in config:
                raise ValueError("'literal' directive requires a 'value' key.")
            return config['value']
        if kind == 'ref':
            key = config['key']
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]
        raise ValueError(f"unknown _gen directive: '{kind}'")

    def _count(self, item_schema: Any) -> int:
        count_config = item_schema.get('_gen_count', _DEFAULT_COUNT) if isinstance(item_schema, dict) else _DEFAULT_COUNT
        if isinstance(count_config, (list, tuple)):
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return int(count_config)

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if '_gen' in schema:
                return self._directive(schema, context)
            record = {}
            for field, field_schema in schema.items():
                # refs can see the enclosing record and the fields generated so far
                record[field] = self.create(field_schema, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema:
                return []
            item_schema = schema[0]
            actual = item_schema.get('_gen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual, context) for _ in range(self._count(item_schema))]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_provider(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_provider(schema)

        return schema


class SchemaSource:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> EnumerableList:
        """generate count records as an enumerable list"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> SchemaSource:
    return SchemaSource(schema, seed)
