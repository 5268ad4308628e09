from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Uninitialized:
    """No acquisition has happened yet."""


@dataclass(frozen=True)
class Initialized:
    previous_invocation: float


ThrottleState = Union[Uninitialized, Initialized]
