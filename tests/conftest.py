import os
import tempfile

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "school_records_test_logs"))

from datetime import datetime, timedelta

import mongomock
import pytest

from school_records.config.settings import COLLECTIONS
from school_records.repositories.core.repository_factory import RepositoryFactory
from school_records.services.parent.parent_service import ParentService
from school_records.services.payment_type.payment_type_service import PaymentTypeService
from school_records.services.registration.registration_service import RegistrationService
from school_records.services.student.student_service import StudentService

BASE_TIME = datetime(2026, 1, 1, 8, 0, 0)


@pytest.fixture
def db():
    database = mongomock.MongoClient().school_records_test
    RepositoryFactory.use_database(database)
    yield database
    RepositoryFactory.use_database(None)


@pytest.fixture
def student_service(db):
    return StudentService()


@pytest.fixture
def parent_service(db):
    return ParentService()


@pytest.fixture
def registration_service(db):
    return RegistrationService()


@pytest.fixture
def payment_type_service(db):
    return PaymentTypeService()


@pytest.fixture
def students(db):
    return db[COLLECTIONS["student_collection"]]


@pytest.fixture
def parents(db):
    return db[COLLECTIONS["parent_collection"]]


@pytest.fixture
def registrations(db):
    return db[COLLECTIONS["registration_collection"]]


@pytest.fixture
def payment_types(db):
    return db[COLLECTIONS["payment_type_collection"]]


def student_data(**overrides):
    data = {
        "grade": "1A",
        "firstName": "Sari",
        "lastName": "Putri",
        "birthplace": "Bandung",
        "birthdate": "2018-04-12",
        "gender": True,
        "religion": "Islam",
        "citizenship": "Indonesia",
        "address": "Jl. Merdeka 10",
        "nickname": "Sari",
        "birthOrder": 1,
        "numOfSiblings": 2,
        "statusInFamily": "biological",
        "bloodType": "O",
        "distanceToHome": "2 km",
        "language": "Indonesian",
    }
    data.update(overrides)
    return data


def registration_data(**overrides):
    data = {
        "name": "Dewi Lestari",
        "email": "dewi@example.com",
        "phone": "08123456789",
        "address": "Jl. Melati 5",
        "numChildrens": 2,
        "ageChildrens": "5, 7",
        "grade": "1",
        "reason": "Close to home",
    }
    data.update(overrides)
    return data


def seed(collection, count, **fields):
    """Insert `count` documents one minute apart starting at BASE_TIME"""
    docs = []
    for i in range(count):
        doc = dict(fields, seq=i, createdAt=BASE_TIME + timedelta(minutes=i),
                   updatedAt=BASE_TIME + timedelta(minutes=i))
        docs.append(doc)
    collection.insert_many(docs)
    return docs
