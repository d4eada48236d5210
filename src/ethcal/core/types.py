from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Literal, Tuple

DateTriple = Tuple[int, int, int]
CalendarSystem = Literal["ethiopian", "gregorian"]

@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    system: CalendarSystem = "ethiopian"

    def __iter__(self) -> Iterator[int]:
        # unpacks as the bare triple so it can go wherever a packed date is accepted
        return iter((self.year, self.month, self.day))

    def __len__(self) -> int:
        return 3

    def as_tuple(self) -> DateTriple:
        return (self.year, self.month, self.day)
