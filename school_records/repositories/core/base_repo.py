"""Base Record Repository - Data Access Layer (SoC)

One date-ranged, filterable, countable collection. Entity repositories only
configure the collection and which equality filters they accept.
"""
import logging
from typing import Dict, List, Optional, Tuple
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from school_records.repositories.core.query_builders import (
    CREATED_AT, build_date_range_filter, build_download_query
)
from school_records.utils.security.security_utils import to_object_id
from school_records.utils.statistics.histogram_utils import build_value_histogram

logger = logging.getLogger(__name__)

class BaseRecordRepo:
    filter_fields: Tuple[str, ...] = ()
    date_filter_fields: Tuple[str, ...] = ()

    def __init__(self, collection: Collection):
        self.collection = collection

    def find_by_id(self, record_id) -> Optional[Dict]:
        """Return the document, or None for a malformed or unknown id (no query for malformed ids)"""
        object_id = to_object_id(record_id)
        if object_id is None:
            return None
        return self.collection.find_one({"_id": object_id})

    def find_page(self, page: int, per_page: int) -> List[Dict]:
        return list(
            self.collection.find()
            .sort(CREATED_AT, DESCENDING)
            .skip(per_page * (page - 1))
            .limit(per_page)
        )

    def find_for_download(self, start=None, end=None, **filters) -> List[Dict]:
        query = build_download_query(start, end, filters, self.filter_fields, self.date_filter_fields)
        logger.debug(f"{self.collection.name} download query: {query}")
        return list(self.collection.find(query))

    def count_by_field(self, field: str, start=None, end=None) -> List[Dict]:
        """Histogram of `field` over the date range; equality filters are not applied"""
        query = build_date_range_filter(start, end)
        logger.debug(f"{self.collection.name} count query on {field}: {query}")
        documents = self.collection.find(query, {field: 1})
        return build_value_histogram(documents, field)

    def insert(self, document: Dict) -> Dict:
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def update_fields(self, record_id, fields: Dict) -> Optional[Dict]:
        """Set `fields` on the document and return the updated version, None if absent"""
        object_id = to_object_id(record_id)
        if object_id is None:
            return None
        return self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER
        )
