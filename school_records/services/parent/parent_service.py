"""Parent Service - Business Logic Layer"""
from typing import Dict
from school_records.models import parent
from school_records.repositories.core.repository_factory import RepositoryFactory
from school_records.services.core.record_service import RecordService

class ParentService(RecordService):
    entity_name = "parent"
    not_found_message = parent.NOT_FOUND_MESSAGE
    fields = parent.PARENT_FIELDS

    def default_repo(self):
        return RepositoryFactory.get_parent_repo()

    def transform(self, document: Dict) -> Dict:
        return parent.transform(document)
