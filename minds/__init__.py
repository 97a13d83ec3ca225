import logging

from minds.client import Client
from minds.core.exceptions import (
    Forbidden,
    MindsError,
    ObjectNotFound,
    ObjectNotSupported,
    Unauthorized,
    UnknownError,
)
from minds.datasources.schemas import DatabaseConfig, Datasource
from minds.minds.exceptions import InvalidDatasourceReference
from minds.minds.schemas import Mind


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "DatabaseConfig",
    "Datasource",
    "Forbidden",
    "InvalidDatasourceReference",
    "Mind",
    "MindsError",
    "ObjectNotFound",
    "ObjectNotSupported",
    "Unauthorized",
    "UnknownError",
]
