"""HTTP interface for the patient service."""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Sequence

import sqlalchemy as sa
from flask import Flask, jsonify, request

from gocare.biz import (
    CreateNewPatientBiz,
    DeletePatientBiz,
    GetPatientBiz,
    ListPatientBiz,
    UpdatePatientBiz,
)
from gocare.errors import AppError, error_internal, error_invalid_request
from gocare.models import PatientCreate, PatientUpdate
from gocare.paging import Paging
from gocare.response import simple_success_response, success_response
from gocare.storage import SQLStore

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AppContext:
    """Shared resources handed to every request handler."""

    db: sa.engine.Engine
    secret_key: str = ""


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    return int(text)


def _path_id(text: str) -> int:
    try:
        return _parse_int(text)
    except ValueError as exc:
        raise error_invalid_request(exc) from exc


def _json_body() -> Any:
    try:
        return json.loads(request.get_data(as_text=True))
    except ValueError as exc:
        raise error_invalid_request(exc) from exc


def _query_int(name: str) -> int:
    raw = request.args.get(name, "")
    if raw == "":
        return 0
    try:
        return _parse_int(raw)
    except ValueError as exc:
        raise error_invalid_request(exc) from exc


def _is_http_exception(err: Exception) -> bool:
    """Tell framework HTTP errors (404, 405, ...) apart from failures in handlers."""
    return isinstance(getattr(err, "code", None), int) and callable(
        getattr(err, "get_response", None)
    )


def create_app(app_ctx: AppContext) -> Flask:
    """Build the web application with its routes and error handling."""
    app = Flask(__name__)

    def store() -> SQLStore:
        return SQLStore(app_ctx.db)

    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        logger.error("request failed: %s", err, exc_info=err)
        return jsonify(err.to_dict()), int(err.status_code)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        if _is_http_exception(err):
            return err
        app_err = error_internal(err)
        logger.error("request failed: %s", err, exc_info=err)
        return jsonify(app_err.to_dict()), int(app_err.status_code)

    @app.get("/ping")
    def ping():
        return jsonify({"message": "pong"})

    @app.post("/v1/patients")
    def create_patient():
        body = _json_body()
        try:
            new_data = PatientCreate.from_dict(body)
        except TypeError as exc:
            raise error_invalid_request(exc) from exc
        CreateNewPatientBiz(store()).create_new_patient(new_data)
        return jsonify(simple_success_response(new_data.id))

    @app.delete("/v1/patients/<patient_id>")
    def delete_patient(patient_id: str):
        DeletePatientBiz(store()).delete_patient(_path_id(patient_id))
        return jsonify(simple_success_response(True))

    @app.get("/v1/patients")
    def list_patients():
        paging = Paging(page=_query_int("page"), limit=_query_int("limit"))
        paging.process()
        result = ListPatientBiz(store()).list_patient(paging)
        return jsonify(
            success_response([patient.to_dict() for patient in result], paging.to_dict())
        )

    @app.get("/v1/patients/<patient_id>")
    def get_patient(patient_id: str):
        data = GetPatientBiz(store()).get_patient(_path_id(patient_id))
        return jsonify(simple_success_response(data.to_dict()))

    @app.put("/v1/patients/<patient_id>")
    def update_patient(patient_id: str):
        pid = _path_id(patient_id)
        body = _json_body()
        try:
            data = PatientUpdate.from_dict(body)
        except TypeError as exc:
            raise error_invalid_request(exc) from exc
        UpdatePatientBiz(store()).update_patient(pid, data)
        return jsonify(simple_success_response(True))

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Start the HTTP server using DB_CONN_STR and SYSTEM_SECRET from the environment."""
    parser = argparse.ArgumentParser(description="Patient records HTTP service.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    dsn = os.environ.get("DB_CONN_STR", "")
    secret_key = os.environ.get("SYSTEM_SECRET", "")
    try:
        engine = sa.create_engine(dsn, echo=True)
    except Exception as exc:  # invalid or unsupported connection string
        logger.error("cannot open database: %s", exc)
        return 1
    logger.info("%s", engine)

    app = create_app(AppContext(db=engine, secret_key=secret_key))
    logger.info("listening on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port)
    return 0