from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class EnumAutoStr(Enum):
    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name


class EnumValueStr(str, Enum):
    pass


def assert_some(result: T | None) -> T:
    assert result is not None
    return result


def dict_without_none(input_: dict[Any, Any]) -> dict[Any, Any]:
    return {k: v for k, v in input_.items() if v is not None}
