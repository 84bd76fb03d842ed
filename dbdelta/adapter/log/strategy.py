from dbdelta import data
from dbdelta.adapter.log.loguru_log import LoguruLog
from dbdelta.adapter.log.null import NullLog

__all__ = ("create",)


def create(*, config: data.Config) -> data.Log | data.Error:
    try:
        if (
            config.log_file is None
            and not config.log_assertions
            and not config.log_assertion_errors
            and not config.log_queries
            and not config.log_snapshots
            and not config.log_setup
        ):
            return NullLog()

        return LoguruLog(log_file=config.log_file)
    except Exception as e:
        return data.Error.execution(str(e), cause=e, log_file=config.log_file)
