from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


# ===========================
# Tagged Remote Call Outcomes
# ===========================
@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]
