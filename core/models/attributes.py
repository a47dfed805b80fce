"""
Attribute Table Models.

The attribute table is the externally supplied, keyed data that drives
color encoding and interaction. It is joined from raw feature properties
(or any record list) once per render pass and is read-only afterwards.

Exports:
    AttributeKey: Type alias for record identifiers
    AttributeRecord: One entity's fields (frozen)
    AttributeTable: Immutable ordered mapping id -> AttributeRecord
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


AttributeKey = Union[str, int]


class AttributeRecord(BaseModel):
    """
    One entity's attributes, keyed by field name.

    Example:
        >>> record = AttributeRecord(id="3201", fields={"province": "Jawa Barat", "score": 4.2})
        >>> record.get("score")
        4.2
    """

    model_config = ConfigDict(frozen=True)

    id: Any
    fields: Dict[str, Any] = Field(default_factory=dict)

    def get(self, field: str, default: Any = None) -> Any:
        """Value of a field, or default when the record lacks it."""
        return self.fields.get(field, default)

    def __getitem__(self, field: str) -> Any:
        return self.fields[field]

    def __contains__(self, field: object) -> bool:
        return field in self.fields


class AttributeTable(Mapping):
    """
    Immutable mapping of id -> AttributeRecord.

    Iteration follows construction order. Group classification assigns
    palette indices in that order, so the same input always yields the
    same colors.
    """

    def __init__(self, records: Iterable[AttributeRecord] = ()):
        data: Dict[Hashable, AttributeRecord] = {}
        for record in records:
            data[record.id] = record
        self._records = MappingProxyType(data)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "AttributeTable":
        """
        Build from {id: {field: value}}.

        Example:
            >>> table = AttributeTable.from_mapping({"a": {"group": "x"}, "b": {"group": "y"}})
            >>> table.lookup("a").get("group")
            'x'
        """
        return cls(AttributeRecord(id=key, fields=dict(fields)) for key, fields in mapping.items())

    @classmethod
    def from_records(cls, records: Iterable[Optional[Mapping]], id_field: str) -> "AttributeTable":
        """
        Build from a flat list of dicts keyed by one of their fields.

        None entries are skipped. A later record with a repeated id replaces
        the earlier one.
        """
        return cls(
            AttributeRecord(id=record[id_field], fields=dict(record))
            for record in records
            if record is not None
        )

    def lookup(self, key: Any) -> Optional[AttributeRecord]:
        """
        Record for key, or None.

        Never raises: None and unhashable keys simply have no record.
        """
        if key is None:
            return None
        try:
            return self._records.get(key)
        except TypeError:
            return None

    def __getitem__(self, key: Any) -> AttributeRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"AttributeTable({len(self)} records)"
