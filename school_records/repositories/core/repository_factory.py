"""Repository Factory - DRY Implementation"""
from typing import Dict
from school_records.config.settings import COLLECTIONS
from school_records.db.central_db import get_collection
from school_records.models.student import PARENT_REFERENCES, STUDENT_FIELDS
from school_records.repositories.student.student_repo import StudentRepo
from school_records.repositories.parent.parent_repo import ParentRepo
from school_records.repositories.registration.registration_repo import RegistrationRepo
from school_records.repositories.payment_type.payment_type_repo import PaymentTypeRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _db = None
    _repos: Dict[str, object] = {}

    @classmethod
    def use_database(cls, db) -> None:
        """Point all repositories at `db` (None restores the configured client)"""
        cls._db = db
        cls._repos = {}

    @classmethod
    def _collection(cls, key: str):
        if cls._db is None:
            return get_collection(key)
        return cls._db[COLLECTIONS[key]]

    @classmethod
    def get_student_repo(cls) -> StudentRepo:
        if "student" not in cls._repos:
            references = {
                ref: cls._collection(STUDENT_FIELDS[ref].collection_key) for ref in PARENT_REFERENCES
            }
            cls._repos["student"] = StudentRepo(cls._collection("student_collection"), references)
        return cls._repos["student"]

    @classmethod
    def get_parent_repo(cls) -> ParentRepo:
        if "parent" not in cls._repos:
            cls._repos["parent"] = ParentRepo(cls._collection("parent_collection"))
        return cls._repos["parent"]

    @classmethod
    def get_registration_repo(cls) -> RegistrationRepo:
        if "registration" not in cls._repos:
            cls._repos["registration"] = RegistrationRepo(cls._collection("registration_collection"))
        return cls._repos["registration"]

    @classmethod
    def get_payment_type_repo(cls) -> PaymentTypeRepo:
        if "payment_type" not in cls._repos:
            cls._repos["payment_type"] = PaymentTypeRepo(cls._collection("payment_type_collection"))
        return cls._repos["payment_type"]
