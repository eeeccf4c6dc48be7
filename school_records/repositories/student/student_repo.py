"""Student Repository - Data Access Layer (SoC)"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional
from pymongo.collection import Collection
from school_records.models.student import PARENT_REFERENCES, STUDENT_FILTERS
from school_records.repositories.core.base_repo import BaseRecordRepo
from school_records.repositories.student.student_pipelines import build_form_count_pipeline

class StudentRepo(BaseRecordRepo):
    filter_fields = STUDENT_FILTERS
    date_filter_fields = ("birthdate",)

    def __init__(self, collection: Collection, reference_collections: Dict[str, Collection]):
        """`reference_collections` maps each parent reference field to the collection it points at"""
        super().__init__(collection)
        self.reference_collections = reference_collections

    def find_by_id(self, record_id) -> Optional[Dict]:
        student = super().find_by_id(record_id)
        if student is None:
            return None
        return self.populate_parents([student])[0]

    def find_page(self, page: int, per_page: int) -> List[Dict]:
        return self.populate_parents(super().find_page(page, per_page))

    def populate_parents(self, students: Iterable[Dict]) -> List[Dict]:
        """Replace mother_id/father_id with the referenced parent documents (None when missing)"""
        students = list(students)

        # one $in query per referenced collection
        wanted = {}
        for ref in PARENT_REFERENCES:
            collection = self.reference_collections[ref]
            _, ids = wanted.setdefault(collection.name, (collection, set()))
            ids.update(s[ref] for s in students if s.get(ref) is not None)

        found = {}
        for name, (collection, ids) in wanted.items():
            if ids:
                found[name] = {p["_id"]: p for p in collection.find({"_id": {"$in": list(ids)}})}

        for student in students:
            for ref in PARENT_REFERENCES:
                if ref in student:
                    name = self.reference_collections[ref].name
                    student[ref] = found.get(name, {}).get(student[ref])
        return students

    def count_forms_by_year(self, since: datetime, until: datetime) -> List[Dict]:
        return list(self.collection.aggregate(build_form_count_pipeline(since, until)))
