"""Patient record service: models, business rules, SQL storage and a Flask HTTP API."""

__version__ = "0.1.0"