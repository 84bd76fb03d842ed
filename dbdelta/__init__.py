from dbdelta.api import *
from dbdelta.data import (
    Config,
    DataSet,
    DataSource,
    Db,
    DbAssertionError,
    DbConfig,
    Delta,
    Error,
    ErrorKind,
    ExecutionError,
    InternalError,
    Query,
    Row,
    RowMultiset,
    Table,
    UsageError,
)

__version__ = "0.1.0"
