import dataclasses
import typing

__all__ = ("Column",)


@dataclasses.dataclass(frozen=True)
class Column:
    name: str
    type_code: typing.Any
