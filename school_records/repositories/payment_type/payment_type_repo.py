"""Payment Type Repository - Data Access Layer (SoC)"""
from school_records.models.payment_type import PAYMENT_TYPE_FILTERS
from school_records.repositories.core.base_repo import BaseRecordRepo

class PaymentTypeRepo(BaseRecordRepo):
    filter_fields = PAYMENT_TYPE_FILTERS
    date_filter_fields = ("deadline",)
