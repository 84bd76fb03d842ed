import importlib
import typing

__all__ = (
    "detect_paramstyle",
    "to_paramstyle",
)


def detect_paramstyle(connection: typing.Any, /) -> str:
    module_name = type(connection).__module__.split(".")[0]
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return "qmark"
    return typing.cast(str, getattr(module, "paramstyle", "qmark"))


def to_paramstyle(*, sql: str, paramstyle: str, has_params: bool) -> str:
    """Translate ``?`` placeholders to the driver's style.

    Placeholders inside string literals are not recognised, so statements should not
    contain literal question marks.
    """
    match paramstyle:
        case "qmark":
            return sql
        case "format" | "pyformat":
            if not has_params:
                return sql
            return sql.replace("%", "%%").replace("?", "%s")
        case "numeric":
            parts = sql.split("?")
            return "".join(
                part + (f":{i}" if i < len(parts) else "")
                for i, part in enumerate(parts, start=1)
            )
        case _:
            raise ValueError(f"The paramstyle, {paramstyle!r}, is not supported.")
