import contextlib
import typing

import keyring
from loguru import logger

from dbdelta import data

__all__ = ("credentials", "managed")


@contextlib.contextmanager
def managed(con: typing.Any, /) -> typing.Generator[typing.Any, None, None]:
    """Commit on success, roll back on failure, and always close."""
    try:
        yield con
    except BaseException:
        logger.debug("Rolling back after an error.")
        con.rollback()
        raise
    else:
        con.commit()
    finally:
        con.close()


def credentials(*, db_config: data.DbConfig) -> tuple[str | None, str | None]:
    username = keyring.get_password("system", db_config.keyring_db_username_entry or "")
    password = keyring.get_password("system", db_config.keyring_db_password_entry or "")
    return username, password
