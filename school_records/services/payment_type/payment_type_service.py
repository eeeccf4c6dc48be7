"""Payment Type Service - Business Logic Layer"""
from typing import Dict
from school_records.models import payment_type
from school_records.repositories.core.repository_factory import RepositoryFactory
from school_records.services.core.record_service import RecordService

class PaymentTypeService(RecordService):
    entity_name = "payment type"
    not_found_message = payment_type.NOT_FOUND_MESSAGE
    fields = payment_type.PAYMENT_TYPE_FIELDS

    def default_repo(self):
        return RepositoryFactory.get_payment_type_repo()

    def transform(self, document: Dict) -> Dict:
        return payment_type.transform(document)
