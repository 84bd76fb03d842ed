from dbdelta import data
from dbdelta.adapter.connection_provider.sqlite import SqliteConnectionProvider

__all__ = ("create",)


def create(*, db_config: data.DbConfig) -> data.ConnectionProvider | data.Error:
    try:
        match db_config.api:
            case data.API.SQLITE:
                return SqliteConnectionProvider(db_config=db_config)
            case data.API.PSYCOPG:
                from dbdelta.adapter.connection_provider.pg import PgConnectionProvider

                return PgConnectionProvider(db_config=db_config)
            case data.API.PYODBC:
                from dbdelta.adapter.connection_provider.odbc import OdbcConnectionProvider

                return OdbcConnectionProvider(db_config=db_config)
            case _:
                return data.Error.usage(
                    f"ConnectionProvider is not implemented for the {db_config.api!s} api.",
                    db_config=db_config,
                )
    except Exception as e:
        return data.Error.execution(str(e), cause=e, db_config=db_config)
