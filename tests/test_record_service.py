from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from school_records.config.settings import PaginationConfig
from school_records.exceptions.exceptions import NotFoundError, ValidationError
from school_records.repositories.parent.parent_repo import ParentRepo
from school_records.repositories.payment_type.payment_type_repo import PaymentTypeRepo
from school_records.repositories.registration.registration_repo import RegistrationRepo
from school_records.repositories.student.student_repo import StudentRepo
from school_records.services.parent.parent_service import ParentService
from school_records.services.payment_type.payment_type_service import PaymentTypeService
from school_records.services.registration.registration_service import RegistrationService
from school_records.services.student.student_service import StudentService

from conftest import BASE_TIME, registration_data, seed

NOT_FOUND_CASES = [
    (lambda c: RegistrationService(RegistrationRepo(c)), "Registration Form does not exist"),
    (lambda c: PaymentTypeService(PaymentTypeRepo(c)), "The payment type does not exist"),
    (lambda c: StudentService(StudentRepo(c, {"mother_id": MagicMock(), "father_id": MagicMock()})), "Student does not exist"),
    (lambda c: ParentService(ParentRepo(c)), "Parent does not exist"),
]


@pytest.mark.parametrize("build_service, message", NOT_FOUND_CASES)
@pytest.mark.parametrize("bad_id", ["not-an-id", "123", "", {"$ne": None}, None])
def test_get_with_malformed_id_never_queries_store(build_service, message, bad_id):
    collection = MagicMock()
    service = build_service(collection)

    with pytest.raises(NotFoundError) as exc:
        service.get(bad_id)

    assert exc.value.message == message
    assert exc.value.status == 404
    collection.find_one.assert_not_called()


@pytest.mark.parametrize("service_fixture", [
    "registration_service", "payment_type_service", "student_service", "parent_service",
])
def test_get_with_absent_id_is_not_found(request, service_fixture):
    service = request.getfixturevalue(service_fixture)

    with pytest.raises(NotFoundError) as exc:
        service.get(str(ObjectId()))

    assert exc.value.status == 404


def test_get_returns_stored_document(registration_service, registrations):
    _id = registrations.insert_one(dict(registration_data(), createdAt=BASE_TIME)).inserted_id

    assert registration_service.get(str(_id))["email"] == "dewi@example.com"


def test_list_second_page_returns_records_11_to_20(registration_service, registrations):
    seed(registrations, 25, grade="1")

    page = registration_service.list(page=2, per_page=10)

    # newest first: seq 24 .. 0, so the second page holds seq 14 .. 5
    assert [doc["seq"] for doc in page] == list(range(14, 4, -1))


def test_list_defaults_to_first_page_of_thirty(registration_service, registrations):
    seed(registrations, 35)

    page = registration_service.list()

    assert len(page) == 30
    assert page[0]["seq"] == 34


def test_list_honours_per_page_above_http_cap(registration_service, registrations, monkeypatch):
    monkeypatch.setattr(PaginationConfig, "MAX_PER_PAGE", 2)
    seed(registrations, 5)

    assert len(registration_service.list(page=1, per_page=4)) == 4


def test_list_download_inclusive_range(payment_type_service, payment_types):
    seed(payment_types, 10, type="tuition")

    result = payment_type_service.list_download(
        start=BASE_TIME + timedelta(minutes=2), end=BASE_TIME + timedelta(minutes=5))

    assert sorted(d["seq"] for d in result) == [2, 3, 4, 5]


def test_list_download_one_sided_ranges(payment_type_service, payment_types):
    seed(payment_types, 10, type="tuition")
    pivot = BASE_TIME + timedelta(minutes=6)

    assert sorted(d["seq"] for d in payment_type_service.list_download(end=pivot)) == list(range(0, 7))
    assert sorted(d["seq"] for d in payment_type_service.list_download(start=pivot)) == [6, 7, 8, 9]


def test_list_download_without_bounds_uses_equality_filters(payment_type_service, payment_types):
    seed(payment_types, 3, type="tuition")
    seed(payment_types, 2, type="uniform")

    assert len(payment_type_service.list_download()) == 5
    assert len(payment_type_service.list_download(type="uniform")) == 2


def test_list_download_ignores_unknown_filters(registration_service, registrations):
    seed(registrations, 4, grade="1")

    assert len(registration_service.list_download(reason="anything")) == 4


def test_filtered_count_ignores_equality_filters_and_applies_dates(registration_service, registrations):
    seed(registrations, 3, grade="1")
    registrations.insert_one({"grade": "2", "createdAt": BASE_TIME + timedelta(days=1)})
    registrations.insert_one({"createdAt": BASE_TIME + timedelta(days=1)})

    assert registration_service.filtered_count("grade") == [
        {"value": "1", "count": 3},
        {"value": "2", "count": 1},
    ]
    assert registration_service.filtered_count("grade", start=BASE_TIME + timedelta(hours=1)) == [
        {"value": "2", "count": 1},
    ]


def test_filtered_count_requires_group_field(registration_service):
    with pytest.raises(ValidationError):
        registration_service.filtered_count(None)


def test_create_validates_and_stamps(registration_service, registrations):
    created = registration_service.create(registration_data(email="NEW@Example.com"))

    stored = registrations.find_one({"_id": created["_id"]})
    assert stored["email"] == "new@example.com"
    assert stored["createdAt"] == stored["updatedAt"]


def test_create_rejects_invalid_data(registration_service, registrations):
    with pytest.raises(ValidationError):
        registration_service.create(registration_data(phone=None))

    assert registrations.count_documents({}) == 0


def test_update_keeps_created_at_and_refreshes_updated_at(registration_service, registrations):
    _id = registrations.insert_one(
        dict(registration_data(), createdAt=BASE_TIME, updatedAt=BASE_TIME)).inserted_id

    updated = registration_service.update(str(_id), registration_data(grade="3"))

    assert updated["grade"] == "3"
    assert updated["createdAt"] == BASE_TIME
    assert updated["updatedAt"] > BASE_TIME


def test_update_unknown_record_is_not_found(registration_service):
    with pytest.raises(NotFoundError):
        registration_service.update(str(ObjectId()), registration_data())
    with pytest.raises(NotFoundError):
        registration_service.update("bad", registration_data())


def test_list_download_ands_date_range_with_equality_filters(payment_type_service, payment_types):
    seed(payment_types, 6, type="tuition")
    seed(payment_types, 6, type="uniform")
    start, end = BASE_TIME + timedelta(minutes=1), BASE_TIME + timedelta(minutes=3)

    result = payment_type_service.list_download(start=start, end=end, type="uniform")

    assert len(result) == 3
    assert all(d["type"] == "uniform" for d in result)
    assert sorted(d["seq"] for d in result) == [1, 2, 3]


def test_filtered_count_with_only_end_bound(registration_service, registrations):
    seed(registrations, 3, grade="1")
    registrations.insert_one({"grade": "2", "createdAt": BASE_TIME + timedelta(days=1)})

    assert registration_service.filtered_count("grade", end=BASE_TIME + timedelta(minutes=1)) == [
        {"value": "1", "count": 2},
    ]
