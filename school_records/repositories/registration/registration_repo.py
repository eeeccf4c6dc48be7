"""Registration Repository - Data Access Layer (SoC)"""
from school_records.models.registration import REGISTRATION_FILTERS
from school_records.repositories.core.base_repo import BaseRecordRepo

class RegistrationRepo(BaseRecordRepo):
    filter_fields = REGISTRATION_FILTERS
