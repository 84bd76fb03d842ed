import json
import pathlib
import typing

import pydantic

from dbdelta import data

__all__ = ("load",)


_OPTIONS: typing.Final[tuple[str, ...]] = (
    "log-assertions",
    "log-assertion-errors",
    "log-queries",
    "log-snapshots",
    "log-setup",
    "reuse-statements",
    "case-sensitive-column-names",
)


def load(*, config_file: pathlib.Path) -> data.Config | data.Error:
    # noinspection PyBroadException
    try:
        if not config_file.exists():
            return data.Error.usage(
                f"The config file specified, {config_file.resolve()!s}, does not exist.",
                config_file=config_file,
            )

        with config_file.open("r") as fh:
            d = typing.cast(dict[str, typing.Any], json.load(fh))

        return parse(d)
    except Exception as e:
        return data.Error.usage(
            "An error occurred while loading the config file.",
            config_file=config_file,
            error=str(e),
        )


def parse(d: dict[str, typing.Any], /) -> data.Config | data.Error:
    unknown = set(d.keys()) - set(_OPTIONS) - {"batch-size", "log-file", "databases"}
    if unknown:
        return data.Error.usage(f"config file has unrecognized entries: {', '.join(sorted(unknown))}.")

    options: dict[str, typing.Any] = {}
    for key in _OPTIONS:
        if key in d:
            if not isinstance(d[key], bool):
                return data.Error.usage(f"config entry, {key!r}, must be true or false, but got {d[key]!r}.")

            options[key.replace("-", "_")] = d[key]

    if "batch-size" in d:
        options["batch_size"] = d["batch-size"]

    if d.get("log-file") is not None:
        options["log_file"] = pathlib.Path(d["log-file"])

    databases: list[data.DbConfig] = []
    for db_dict in d.get("databases", []):
        db_config = _parse_db_dict(db_dict)
        if isinstance(db_config, data.Error):
            return db_config

        databases.append(db_config)

    try:
        return data.Config(**options, databases=tuple(databases))
    except pydantic.ValidationError as e:
        return data.Error.usage(f"config file is invalid: {e!s}")


def _parse_db_dict(db_dict: dict[str, typing.Any], /) -> data.DbConfig | data.Error:
    if "db-id" not in db_dict.keys():
        return data.Error.usage("database entry in config file is missing an entry for 'db-id'.")

    db_id: typing.Final[str] = db_dict["db-id"]

    if "api" not in db_dict.keys():
        return data.Error.usage(
            "database entry in config file is missing an entry for 'api'.",
            db_id=db_id,
        )

    try:
        api: typing.Final[data.API] = data.API(db_dict["api"])
    except ValueError:
        return data.Error.usage(
            f"could not convert api entry, {db_dict['api']!r}, to a data.API instance.",
            db_id=db_id,
        )

    host: typing.Final[str | None] = db_dict.get("host")
    db_name: typing.Final[str | None] = db_dict.get("db-name")
    keyring_db_username_entry: typing.Final[str | None] = db_dict.get("keyring-db-username-entry")
    keyring_db_password_entry: typing.Final[str | None] = db_dict.get("keyring-db-password-entry")
    connection_string: typing.Final[str | None] = db_dict.get("connection-string")

    if connection_string is None and api != data.API.SQLITE:
        if (
            host is None
            or db_name is None
            or keyring_db_username_entry is None
            or keyring_db_password_entry is None
        ):
            return data.Error.usage(
                "If connection-string is null, then host, db-name, keyring-db-username-entry, and "
                "keyring-db-password-entry must be provided.",
                db_id=db_id,
            )

    try:
        return data.DbConfig(
            db_id=db_id,
            api=api,
            host=host,
            db_name=db_name,
            keyring_db_username_entry=keyring_db_username_entry,
            keyring_db_password_entry=keyring_db_password_entry,
            connection_string=None if connection_string is None else pydantic.SecretStr(connection_string),
        )
    except pydantic.ValidationError as e:
        return data.Error.usage(f"database entry is invalid: {e!s}", db_id=db_id)
