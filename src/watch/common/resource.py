# -*- coding: utf-8 -*-
"""Three-state envelope for the outcome of one asynchronous fetch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Loading:
    """The fetch has started and has not finished yet."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """The fetch finished and produced ``data``."""

    data: T


@dataclass(frozen=True)
class Error:
    """The fetch failed with a recoverable I/O error."""

    cause: OSError

    @property
    def message(self) -> str:
        return str(self.cause)


Resource = Union[Loading, Success[T], Error]
