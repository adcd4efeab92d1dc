import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .schema import DjangoSchemaProvider, SchemaProvider, is_user_content
from .store import DjangoRecordStore, RecordStore

logger = logging.getLogger(__name__)


@dataclass
class ContentTypeDescriptor:
    uid: str
    display_name: Optional[str] = None
    count: Optional[int] = None

    @property
    def label(self) -> str:
        return self.display_name or self.uid


class ContentCountAggregator:
    """Count stored records for every user-defined content type.

    Nothing is cached: the registry and the record store are queried afresh
    on each call. The first failure aborts the whole aggregation.
    """

    def __init__(self, schema: SchemaProvider, store: RecordStore):
        self.schema = schema
        self.store = store

    def _user_descriptors(self) -> List[ContentTypeDescriptor]:
        descriptors = []
        for uid in self.schema.list_uids():
            if not is_user_content(uid):
                continue
            info = self.schema.get_info(uid) or {}
            descriptors.append(ContentTypeDescriptor(uid=uid, display_name=info.get('displayName') or None))
        return descriptors

    def list_descriptors(self) -> List[ContentTypeDescriptor]:
        """Per-uid descriptors with counts filled in, without merging by label."""
        descriptors = self._user_descriptors()
        for descriptor in descriptors:
            descriptor.count = self.store.count(descriptor.uid, {})
        return descriptors

    def get_content_counts(self) -> Dict[str, int]:
        """Return ``{display name: record count}``.

        Two content types sharing a display name collapse into one entry
        holding the count of the one enumerated last.
        """
        descriptors = self._user_descriptors()
        counts: Dict[str, int] = {d.label: 0 for d in descriptors}
        for descriptor in descriptors:
            counts[descriptor.label] = self.store.count(descriptor.uid, {})

        logger.debug('content counts computed types=%d data=%s', len(counts), counts)
        return counts


def get_aggregator() -> ContentCountAggregator:
    schema = DjangoSchemaProvider()
    return ContentCountAggregator(schema, DjangoRecordStore(schema))


__all__ = ['ContentCountAggregator', 'ContentTypeDescriptor', 'get_aggregator']
