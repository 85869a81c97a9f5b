from numberlist.errors import (
    EmptyListError,
    InvalidArgumentError,
    ListIndexError,
    NumberListError,
)
from numberlist.number_list import NumberList

__all__ = [
    "NumberList",
    "NumberListError",
    "EmptyListError",
    "ListIndexError",
    "InvalidArgumentError",
]
