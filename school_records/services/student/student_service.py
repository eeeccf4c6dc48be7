"""Student Service - Business Logic Layer"""
from datetime import datetime
from typing import Dict, List, Optional
from school_records.config.settings import ReportConfig
from school_records.models import student
from school_records.repositories.core.repository_factory import RepositoryFactory
from school_records.services.core.record_service import RecordService
from school_records.utils.time.timeutils import now_utc, years_before

GIRL = True
BOY = False

class StudentService(RecordService):
    entity_name = "student"
    not_found_message = student.NOT_FOUND_MESSAGE
    fields = student.STUDENT_FIELDS

    def default_repo(self):
        return RepositoryFactory.get_student_repo()

    def transform(self, document: Dict) -> Dict:
        return student.transform(document)

    def form_count(self, now: Optional[datetime] = None) -> List[Dict]:
        """Girls and boys registered per year over the trailing window, oldest year first"""
        until = now or now_utc()
        since = years_before(until, ReportConfig.FORM_COUNT_YEARS)
        rows = self.repo.count_forms_by_year(since, until)
        return [self._form_count_row(row) for row in rows]

    @staticmethod
    def _form_count_row(row: Dict) -> Dict:
        def count_for(gender: bool) -> int:
            for item in row.get("counts", []):
                if item.get("gender") is gender:
                    return item["count"]
            return 0

        return {
            "year": row["_id"],
            "girlCount": count_for(GIRL),
            "boyCount": count_for(BOY),
        }
