# gocare

A small HTTP service for keeping clinic patient records. It exposes a JSON
API for creating, listing, reading, updating and soft-deleting patients,
stored in a SQL database through SQLAlchemy and served with Flask.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Preparing the database

The server does not create its table. Create it once with
`gocare.storage.create_tables` on an engine for the same database:

```python
import sqlalchemy as sa
from gocare.storage import create_tables

create_tables(sa.create_engine("sqlite:///patients.db"))
```

## Running the server

```
DB_CONN_STR=sqlite:///patients.db gocare
```

`DB_CONN_STR` is a SQLAlchemy database URL. `SYSTEM_SECRET` is read from the
environment as well and kept in the application context. The server listens
on `localhost:8080` by default; `--host` and `--port` change that. SQL
statements are logged as they run. If the connection string cannot be
turned into an engine, the command logs the problem and exits with status 1.

## API

| Method | Path                | Purpose                                               |
|--------|---------------------|-------------------------------------------------------|
| GET    | `/ping`             | Health check, answers `{"message": "pong"}`            |
| POST   | `/v1/patients`      | Create a patient from `first-name` and `last-name`, returns its id |
| GET    | `/v1/patients`      | List patients that are not deleted, newest first       |
| GET    | `/v1/patients/<id>` | Fetch one patient                                      |
| PUT    | `/v1/patients/<id>` | Change `first-name`, `last-name`, `address` or `status` |
| DELETE | `/v1/patients/<id>` | Mark a patient as deleted (status 0)                   |

Patient documents use the keys `first-name`, `last-name`, `gender`, `phone`,
`email` and `address`, alongside `id`, `status`, `created_at` and
`updated_at`.

Successful responses wrap their payload as `{"data": ...}`. Listings take
`page` and `limit` query parameters and add a `paging` object with `page`,
`limit` and `total`. `page` defaults to 1, and a `limit` that is missing,
zero or below, or above 100 becomes 10.

Errors are returned as JSON with `status_code`, `message`, `log` and
`error_key`:

- a body that is not JSON, a field of the wrong type, an id or paging value
  that is not an integer, or a blank first or last name on create:
  400 with `INVALID_REQUEST`;
- deleting a patient that does not exist: 400 with `ErrorPatientNotFound`;
- database failures: 500 with `ErrDB`;
- any other failure, such as reading or updating a patient that does not
  exist or is already deleted, or a blank name or address on update:
  500 with `ErrInternal`, the cause given in `log`.

## Using it as a library

`gocare.web.create_app` builds the Flask application from a
`gocare.web.AppContext`, so it can be embedded or tested without starting a
server:

```python
import sqlalchemy as sa
from gocare.storage import create_tables
from gocare.web import AppContext, create_app

engine = sa.create_engine("sqlite://")
create_tables(engine)
client = create_app(AppContext(db=engine)).test_client()
client.post("/v1/patients", json={"first-name": "Ada", "last-name": "Lee"})
```

The business rules live in `gocare.biz` (`CreateNewPatientBiz`,
`GetPatientBiz`, `ListPatientBiz`, `UpdatePatientBiz`, `DeletePatientBiz`);
each accepts any store object offering the methods of
`gocare.storage.SQLStore` that it uses. The records and request shapes are in
`gocare.models` (`Patient`, `PatientCreate`, `PatientUpdate`), the error
types and helpers in `gocare.errors`, and pagination in `gocare.paging.Paging`.
`gocare.hashers` offers `FNVHasher` (FNV-1a, 64 bit) and `MD5Hasher`, and
`gocare.salt.gen_salt` makes random salts of ASCII letters.

## What it does not do

There are no user accounts: no registration, login, profile or token
endpoints, and no authentication or role checks on the patient routes.
Every route is open to any client. `SYSTEM_SECRET` is stored but not used,
and the hashers and salt generator are not wired into any route.