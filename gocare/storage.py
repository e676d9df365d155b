"""Relational storage for patient records."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError

from gocare.errors import DataNotFoundError, error_db
from gocare.models import TABLE_NAME, Patient, PatientCreate, PatientUpdate
from gocare.paging import Paging

metadata = sa.MetaData()

patients = sa.Table(
    TABLE_NAME,
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("status", sa.Integer, nullable=False, default=1),
    sa.Column("created_at", sa.DateTime),
    sa.Column("updated_at", sa.DateTime),
    sa.Column("first_name", sa.String),
    sa.Column("last_name", sa.String),
    sa.Column("gender", sa.String),
    sa.Column("phone", sa.String),
    sa.Column("email", sa.String),
    sa.Column("address", sa.String),
)


def create_tables(engine: sa.engine.Engine) -> None:
    """Create the patient table if it does not exist."""
    metadata.create_all(engine)


def _row_to_patient(row: Mapping[str, Any]) -> Patient:
    return Patient(
        id=row["id"],
        status=row["status"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        first_name=row["first_name"] or "",
        last_name=row["last_name"] or "",
        gender=row["gender"] or "",
        phone=row["phone"] or "",
        email=row["email"] or "",
        address=row["address"] or "",
    )


def _where(condition: Mapping[str, Any]) -> list[Any]:
    clauses = []
    for column, value in condition.items():
        if column not in patients.c:
            raise error_db(ValueError(f"unknown column {column!r}"))
        clauses.append(patients.c[column] == value)
    return clauses


class SQLStore:
    """Patient storage backed by a SQLAlchemy engine."""

    def __init__(self, engine: sa.engine.Engine) -> None:
        self.engine = engine

    def create(self, data: PatientCreate) -> None:
        """Insert a new patient and fill in its id and timestamps."""
        now = datetime.now()
        status = data.status or 1
        values: dict[str, Any] = {
            "status": status,
            "created_at": now,
            "updated_at": now,
            "first_name": data.first_name,
            "last_name": data.last_name,
        }
        if data.id:
            values["id"] = data.id
        try:
            with self.engine.begin() as conn:
                result = conn.execute(sa.insert(patients).values(**values))
        except SQLAlchemyError as exc:
            raise error_db(exc) from exc
        data.id = result.inserted_primary_key[0]
        data.status = status
        data.created_at = now
        data.updated_at = now

    def find_data_with_condition(self, condition: Mapping[str, Any]) -> Patient:
        """The first patient, by id, matching every column in the condition."""
        query = (
            sa.select(patients)
            .where(*_where(condition))
            .order_by(patients.c.id)
            .limit(1)
        )
        try:
            with self.engine.connect() as conn:
                row = conn.execute(query).mappings().first()
        except SQLAlchemyError as exc:
            raise error_db(exc) from exc
        if row is None:
            raise DataNotFoundError()
        return _row_to_patient(row)

    def list_data_with_condition(self, paging: Paging) -> list[Patient]:
        """One page of patients that are not deleted, newest first; sets the total."""
        active = patients.c.status.not_in([0])
        count_query = sa.select(sa.func.count()).select_from(patients).where(active)
        offset = (paging.page - 1) * paging.limit
        page_query = (
            sa.select(patients)
            .where(active)
            .order_by(patients.c.id.desc())
            .limit(paging.limit)
            .offset(offset)
        )
        try:
            with self.engine.connect() as conn:
                paging.total = conn.execute(count_query).scalar_one()
                rows = conn.execute(page_query).mappings().all()
        except SQLAlchemyError as exc:
            raise error_db(exc) from exc
        return [_row_to_patient(row) for row in rows]

    def update(self, condition: Mapping[str, Any], update_data: PatientUpdate) -> None:
        """Apply the fields that are set in the update to the matching patients."""
        if not condition:
            raise error_db(ValueError("where conditions required"))
        clauses = _where(condition)
        changes = update_data.changes()
        if not changes:
            return
        try:
            with self.engine.begin() as conn:
                conn.execute(sa.update(patients).where(*clauses).values(**changes))
        except SQLAlchemyError as exc:
            raise error_db(exc) from exc