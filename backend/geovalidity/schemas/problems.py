from dataclasses import dataclass
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import ProblemPosition
from typing import Iterator


@dataclass(frozen=True)
class ProblemAtPosition:
    problem: Problem
    position: ProblemPosition

    def __str__(self) -> str:
        return f'{self.problem} at {self.position.describe()}'


@dataclass(frozen=True)
class ProblemReport:
    problems: tuple[ProblemAtPosition, ...]

    def __iter__(self) -> Iterator[ProblemAtPosition]:
        return iter(self.problems)

    def __len__(self) -> int:
        return len(self.problems)

    def __getitem__(self, index: int) -> ProblemAtPosition:
        return self.problems[index]

    def __str__(self) -> str:
        return '\n'.join(f'{problem}.' for problem in self.problems)
