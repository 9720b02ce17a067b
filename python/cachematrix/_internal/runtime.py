from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator

from .linalg import invert

Solver = Callable[..., Any]


class Runtime:
    def __init__(self, *, default_solver: Solver = invert) -> None:
        self._default_solver = default_solver

    def get_default_solver(self) -> Solver:
        return self._default_solver

    def set_default_solver(self, solver: Solver | None) -> None:
        if solver is None:
            solver = invert
        if not callable(solver):
            raise TypeError("solver must be callable (matrix, *args, **options) -> inverse")
        self._default_solver = solver

    @contextmanager
    def default_solver(self, solver: Solver | None) -> Iterator[Solver]:
        """Temporarily replace the default solver, restoring it on exit."""

        prev = self._default_solver
        self.set_default_solver(solver)
        try:
            yield self._default_solver
        finally:
            self._default_solver = prev


runtime = Runtime()
