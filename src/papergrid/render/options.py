"""Render options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from papergrid.layout.solver import DEFAULT_MAX_SEARCH_STEPS


@dataclass
class RenderOptions:
    """
    Tuning knobs for a render.

    Example:
        >>> options = RenderOptions().with_max_search_steps(500).with_strict()
        >>> text = grid.render(options)
    """

    # Upper bound on width increments tried by the solver
    max_search_steps: int = DEFAULT_MAX_SEARCH_STEPS

    # Raise SolverConvergenceError instead of falling back
    strict: bool = False

    def with_max_search_steps(self, steps: int) -> RenderOptions:
        """Set the solver's search bound."""
        if steps < 0:
            raise ValueError(f"max_search_steps must be non-negative, got {steps}")
        self.max_search_steps = steps
        return self

    def with_strict(self, on: bool = True) -> RenderOptions:
        """Enable or disable strict convergence."""
        self.strict = on
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_search_steps": self.max_search_steps,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderOptions:
        """Deserialize from dictionary."""
        options = cls()
        options.with_max_search_steps(data.get("max_search_steps", DEFAULT_MAX_SEARCH_STEPS))
        options.strict = bool(data.get("strict", False))
        return options
