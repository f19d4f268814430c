from .database_repository import (
    Activity,
    DataGateway,
    DatabaseRepository,
    build_statement,
    to_db_value,
)

__all__ = ["Activity", "DataGateway", "DatabaseRepository", "build_statement", "to_db_value"]
