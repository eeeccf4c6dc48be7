"""Registration Service - Business Logic Layer"""
from typing import Dict
from school_records.models import registration
from school_records.repositories.core.repository_factory import RepositoryFactory
from school_records.services.core.record_service import RecordService

class RegistrationService(RecordService):
    entity_name = "registration"
    not_found_message = registration.NOT_FOUND_MESSAGE
    fields = registration.REGISTRATION_FIELDS

    def default_repo(self):
        return RepositoryFactory.get_registration_repo()

    def transform(self, document: Dict) -> Dict:
        return registration.transform(document)
