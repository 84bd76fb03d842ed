import pathlib

import pydantic

from dbdelta.data.db_config import DbConfig

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Config:
    log_assertions: bool = False
    log_assertion_errors: bool = True
    log_queries: bool = False
    log_snapshots: bool = False
    log_setup: bool = False
    reuse_statements: bool = True
    case_sensitive_column_names: bool = False
    batch_size: pydantic.PositiveInt = 1000
    log_file: pathlib.Path | None = None
    databases: tuple[DbConfig, ...] = ()

    def db(self, /, db_id: str) -> DbConfig | None:
        return next((db for db in self.databases if db.db_id == db_id), None)

    def full_logging(self) -> "Config":
        return Config(
            log_assertions=True,
            log_assertion_errors=True,
            log_queries=True,
            log_snapshots=True,
            log_setup=True,
            reuse_statements=self.reuse_statements,
            case_sensitive_column_names=self.case_sensitive_column_names,
            batch_size=self.batch_size,
            log_file=self.log_file,
            databases=self.databases,
        )
