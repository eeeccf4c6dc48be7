"""Record Service - Business Logic Layer shared by every entity"""
import logging
from typing import Dict, List, Optional
from school_records.config.settings import PaginationConfig
from school_records.exceptions.exceptions import NotFoundError, ValidationError
from school_records.models.schema import Field, apply_schema, stamp_new
from school_records.repositories.core.base_repo import BaseRecordRepo
from school_records.utils.security.security_utils import to_object_id
from school_records.utils.time.timeutils import now_utc

logger = logging.getLogger(__name__)

class RecordService:
    """get / list / list_download / filtered_count / create / update for one entity"""

    entity_name = "record"
    not_found_message = "Record does not exist"
    fields: Dict[str, Field] = {}

    def __init__(self, repo: Optional[BaseRecordRepo] = None):
        self.repo = repo if repo is not None else self.default_repo()

    def default_repo(self) -> BaseRecordRepo:
        raise NotImplementedError

    @property
    def filter_fields(self):
        return self.repo.filter_fields

    def transform(self, document: Dict) -> Dict:
        raise NotImplementedError

    def not_found(self) -> NotFoundError:
        return NotFoundError(self.not_found_message)

    def get(self, record_id) -> Dict:
        document = self.repo.find_by_id(record_id)
        if document is None:
            raise self.not_found()
        return document

    def list(self, page=PaginationConfig.DEFAULT_PAGE, per_page=PaginationConfig.DEFAULT_PER_PAGE) -> List[Dict]:
        """Records by createdAt descending; skips per_page * (page - 1), returns up to per_page"""
        return self.repo.find_page(page, per_page)

    def list_download(self, start=None, end=None, **filters) -> List[Dict]:
        """Full result set for export; unknown filter keys are ignored"""
        return self.repo.find_for_download(start, end, **filters)

    def filtered_count(self, group_field: str, start=None, end=None) -> List[Dict]:
        if not group_field:
            raise ValidationError("Group field is required", ["type is required"])
        return self.repo.count_by_field(group_field, start, end)

    def create(self, data: Dict) -> Dict:
        document = stamp_new(apply_schema(data, self.fields))
        created = self.repo.insert(document)
        logger.info(f"Created {self.entity_name} {created['_id']}")
        return created

    def update(self, record_id, data: Dict) -> Dict:
        """Full-document update: every schema field is validated again, createdAt is kept"""
        if to_object_id(record_id) is None:
            raise self.not_found()
        document = apply_schema(data, self.fields)
        document["updatedAt"] = now_utc()
        updated = self.repo.update_fields(record_id, document)
        if updated is None:
            raise self.not_found()
        logger.info(f"Updated {self.entity_name} {updated['_id']}")
        return updated
