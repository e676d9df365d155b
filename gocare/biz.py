"""Business rules for creating, reading, listing, updating and deleting patients."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from gocare.errors import (
    DataDeletedError,
    DataNotFoundError,
    error_cannot_create_entity,
    error_cannot_list_entity,
    error_entity_not_found,
    error_invalid_request,
)
from gocare.models import ENTITY_NAME, Patient, PatientCreate, PatientUpdate
from gocare.paging import Paging


class CreatePatientStore(Protocol):
    def create(self, data: PatientCreate) -> None: ...


class FindPatientStore(Protocol):
    def find_data_with_condition(self, condition: Mapping[str, Any]) -> Patient: ...


class ModifyPatientStore(FindPatientStore, Protocol):
    def update(
        self, condition: Mapping[str, Any], update_data: PatientUpdate
    ) -> None: ...


class ListPatientStore(Protocol):
    def list_data_with_condition(self, paging: Paging) -> list[Patient]: ...


class CreateNewPatientBiz:
    def __init__(self, store: CreatePatientStore) -> None:
        self.store = store

    def create_new_patient(self, data: PatientCreate) -> None:
        """Validate the new patient and store it."""
        try:
            data.validate()
        except ValueError as exc:
            raise error_invalid_request(exc) from exc
        try:
            self.store.create(data)
        except Exception as exc:
            raise error_cannot_create_entity(ENTITY_NAME, exc) from exc


class DeletePatientBiz:
    def __init__(self, store: ModifyPatientStore) -> None:
        self.store = store

    def delete_patient(self, patient_id: int) -> None:
        """Soft-delete a patient by setting its status to 0."""
        try:
            old_data = self.store.find_data_with_condition({"id": patient_id})
        except DataNotFoundError as exc:
            raise error_entity_not_found(ENTITY_NAME, exc) from exc

        if old_data.status == 0:
            raise DataDeletedError()

        self.store.update({"id": patient_id}, PatientUpdate(status=0))


class GetPatientBiz:
    def __init__(self, store: FindPatientStore) -> None:
        self.store = store

    def get_patient(self, patient_id: int) -> Patient:
        return self.store.find_data_with_condition({"id": patient_id})


class ListPatientBiz:
    def __init__(self, store: ListPatientStore) -> None:
        self.store = store

    def list_patient(self, paging: Paging) -> list[Patient]:
        try:
            return self.store.list_data_with_condition(paging)
        except Exception as exc:
            raise error_cannot_list_entity(ENTITY_NAME, exc) from exc


class UpdatePatientBiz:
    def __init__(self, store: ModifyPatientStore) -> None:
        self.store = store

    def update_patient(self, patient_id: int, data: PatientUpdate) -> None:
        """Validate the changes and apply them to a patient that is not deleted."""
        data.validate()

        old_data = self.store.find_data_with_condition({"id": patient_id})
        if old_data.status == 0:
            raise DataDeletedError()

        self.store.update({"id": patient_id}, data)