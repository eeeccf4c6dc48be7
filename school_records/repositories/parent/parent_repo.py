"""Parent Repository - Data Access Layer (SoC)"""
from school_records.models.parent import PARENT_FILTERS
from school_records.repositories.core.base_repo import BaseRecordRepo

class ParentRepo(BaseRecordRepo):
    filter_fields = PARENT_FILTERS
