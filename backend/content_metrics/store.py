from typing import Mapping, Optional, Protocol

from .schema import DjangoSchemaProvider


class RecordStore(Protocol):
    def count(self, uid: str, filters: Optional[Mapping] = None) -> int:
        ...


class DjangoRecordStore:
    """Counts stored records of a content type through the Django ORM."""

    def __init__(self, schema: DjangoSchemaProvider):
        self.schema = schema

    def count(self, uid: str, filters: Optional[Mapping] = None) -> int:
        model = self.schema.get_model(uid)
        return model._default_manager.filter(**dict(filters or {})).count()
