"""Function bindings: a host operation plus the policy for its arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mallet import NativeFn


@dataclass(frozen=True)
class EvaluateAll:
    """Every argument form is evaluated before the operation runs."""

    @property
    def raw_count(self) -> int:
        return 0


@dataclass(frozen=True)
class EvaluateSuffix:
    """The first `raw` argument forms are passed verbatim; the rest are evaluated."""

    raw: int

    def __post_init__(self):
        if self.raw < 0:
            raise ValueError("EvaluateSuffix needs a non-negative count")

    @property
    def raw_count(self) -> int:
        return self.raw


EvalPolicy = Union[EvaluateAll, EvaluateSuffix]

EVALUATE_ALL = EvaluateAll()


@dataclass(frozen=True)
class NativeFunction:
    name: str
    policy: EvalPolicy
    op: NativeFn

    def __repr__(self):
        return f"<native {self.name}>"
