from __future__ import annotations

import pytest

from gocare.biz import (
    CreateNewPatientBiz,
    DeletePatientBiz,
    GetPatientBiz,
    ListPatientBiz,
    UpdatePatientBiz,
)
from gocare.errors import (
    AppError,
    DataDeletedError,
    DataNotFoundError,
    FirstNameBlankError,
    error_cannot_list_entity,
    error_entity_not_found,
)
from gocare.models import ENTITY_NAME, Patient, PatientCreate, PatientUpdate
from gocare.paging import Paging


class FakeCreateStore:
    def __init__(self, err=None):
        self.err = err
        self.created = []

    def create(self, data):
        if self.err is not None:
            raise self.err
        self.created.append(data)


class FakeModifyStore:
    def __init__(self, found=None, find_err=None, upd_err=None):
        self.found = found
        self.find_err = find_err
        self.upd_err = upd_err
        self.find_called = False
        self.update_called = False
        self.updates = []

    def find_data_with_condition(self, condition):
        self.find_called = True
        self.last_condition = dict(condition)
        if self.find_err is not None:
            raise self.find_err
        return self.found

    def update(self, condition, update_data):
        self.update_called = True
        self.updates.append((dict(condition), update_data))
        if self.upd_err is not None:
            raise self.upd_err


class FakeListStore:
    def __init__(self, data=None, err=None):
        self.data = data
        self.err = err
        self.called = False

    def list_data_with_condition(self, paging):
        self.called = True
        if self.err is not None:
            raise self.err
        return self.data


# --- create ---------------------------------------------------------------


def test_create_success():
    store = FakeCreateStore()
    data = PatientCreate(first_name="Test", last_name="User")
    CreateNewPatientBiz(store).create_new_patient(data)
    assert store.created == [data]


def test_create_store_failure():
    store = FakeCreateStore(err=RuntimeError("db error"))
    data = PatientCreate(first_name="Test", last_name="User")
    with pytest.raises(AppError) as info:
        CreateNewPatientBiz(store).create_new_patient(data)
    assert info.value.key == "ErrorCannotCreatePatient"
    assert str(info.value) == "db error"


def test_create_invalid_data_not_stored():
    store = FakeCreateStore()
    data = PatientCreate(first_name="  ", last_name="User")
    with pytest.raises(AppError) as info:
        CreateNewPatientBiz(store).create_new_patient(data)
    assert info.value.key == "INVALID_REQUEST"
    assert str(info.value) == "first name cannot be blank"
    assert store.created == []


# --- delete ---------------------------------------------------------------


def test_delete_not_found():
    store = FakeModifyStore(find_err=DataNotFoundError())
    with pytest.raises(AppError) as info:
        DeletePatientBiz(store).delete_patient(123)
    expected = error_entity_not_found(ENTITY_NAME, DataNotFoundError())
    assert str(info.value) == str(expected)
    assert info.value.key == expected.key
    assert store.update_called is False


def test_delete_find_error_propagates():
    store = FakeModifyStore(find_err=RuntimeError("db fail"))
    with pytest.raises(RuntimeError, match="db fail"):
        DeletePatientBiz(store).delete_patient(123)
    assert store.update_called is False


def test_delete_already_deleted():
    store = FakeModifyStore(found=Patient(id=1, status=0))
    with pytest.raises(DataDeletedError) as info:
        DeletePatientBiz(store).delete_patient(123)
    assert str(info.value) == "data has been deleted"
    assert store.update_called is False


def test_delete_update_error():
    store = FakeModifyStore(found=Patient(id=2, status=1), upd_err=RuntimeError("upd fail"))
    with pytest.raises(RuntimeError, match="upd fail"):
        DeletePatientBiz(store).delete_patient(123)
    assert store.update_called is True


def test_delete_success_sets_status_zero():
    store = FakeModifyStore(found=Patient(id=3, status=1))
    DeletePatientBiz(store).delete_patient(123)
    assert store.update_called is True
    condition, update_data = store.updates[0]
    assert condition == {"id": 123}
    assert update_data.changes() == {"status": 0}


# --- get ------------------------------------------------------------------


def test_get_returns_found_patient():
    patient = Patient(id=7, first_name="John", last_name="Doe")
    store = FakeModifyStore(found=patient)
    assert GetPatientBiz(store).get_patient(7) is patient
    assert store.last_condition == {"id": 7}


def test_get_error_propagates():
    store = FakeModifyStore(find_err=DataNotFoundError())
    with pytest.raises(DataNotFoundError):
        GetPatientBiz(store).get_patient(7)


# --- list -----------------------------------------------------------------


SAMPLE = [
    Patient(id=1, first_name="John", last_name="Doe"),
    Patient(id=2, first_name="Jane", last_name="Smith"),
]


def test_list_success():
    store = FakeListStore(data=SAMPLE)
    got = ListPatientBiz(store).list_patient(Paging(page=1, limit=10))
    assert store.called is True
    assert [(p.id, p.first_name, p.last_name) for p in got] == [
        (1, "John", "Doe"),
        (2, "Jane", "Smith"),
    ]


def test_list_store_error():
    store = FakeListStore(err=RuntimeError("db fail"))
    with pytest.raises(AppError) as info:
        ListPatientBiz(store).list_patient(Paging(page=1, limit=10))
    expected = error_cannot_list_entity(ENTITY_NAME, RuntimeError("db fail"))
    assert store.called is True
    assert str(info.value) == str(expected)
    assert info.value.key == expected.key


# --- update ---------------------------------------------------------------


def test_update_find_error():
    store = FakeModifyStore(find_err=RuntimeError("db fail"))
    with pytest.raises(RuntimeError, match="db fail"):
        UpdatePatientBiz(store).update_patient(123, PatientUpdate(first_name="A"))
    assert store.find_called is True
    assert store.update_called is False


def test_update_already_deleted():
    store = FakeModifyStore(found=Patient(id=1, status=0))
    with pytest.raises(DataDeletedError):
        UpdatePatientBiz(store).update_patient(123, PatientUpdate(first_name="A"))
    assert store.find_called is True
    assert store.update_called is False


def test_update_store_error():
    store = FakeModifyStore(found=Patient(id=2, status=1), upd_err=RuntimeError("upd fail"))
    with pytest.raises(RuntimeError, match="upd fail"):
        UpdatePatientBiz(store).update_patient(123, PatientUpdate(last_name="B"))
    assert store.find_called is True
    assert store.update_called is True


def test_update_success():
    store = FakeModifyStore(found=Patient(id=3, status=1))
    data = PatientUpdate(first_name="C", last_name="D")
    UpdatePatientBiz(store).update_patient(123, data)
    assert store.find_called is True
    assert store.update_called is True
    assert store.updates[0] == ({"id": 123}, data)


def test_update_validation_error_skips_store():
    store = FakeModifyStore(found=Patient(id=3, status=1))
    with pytest.raises(FirstNameBlankError):
        UpdatePatientBiz(store).update_patient(123, PatientUpdate(first_name="   "))
    assert store.find_called is False
    assert store.update_called is False