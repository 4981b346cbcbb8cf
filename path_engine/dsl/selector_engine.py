"""
Path selector engine.
This module evaluates a Path against an element tree, one level per step.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..errors import PredicateFailure
from ..utils.logging import PerformanceLogger, log_exception
from .paths import Path
from .steps import Step, matches

logger = logging.getLogger(__name__)

RECURSIVE = "recursive"
ITERATIVE = "iterative"
STRATEGIES = (RECURSIVE, ITERATIVE)


class SelectorEngine:
    """
    Path selector engine.

    select() tests the first step against the element children of the start
    node, then the next step against the children of every match, and so on
    until the path is used up. Results come back in document order: all
    matches below an earlier candidate precede those below a later one.
    Nothing is sorted or deduplicated, and text or comment children are
    never candidates.

    Two strategies give identical results. "recursive" descends once per
    step; "iterative" keeps one work list per tree level and so does not
    grow the call stack with path length.
    """

    def __init__(self, strategy: str = RECURSIVE, log_timing: bool = False):
        """
        Initialize the selector engine.

        Args:
            strategy: "recursive" or "iterative"
            log_timing: Whether to log the duration of every selection

        Raises:
            ValueError: If the strategy is unknown
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown selection strategy {strategy!r}, expected one of {STRATEGIES}")

        self.strategy = strategy
        self.log_timing = log_timing

        logger.debug(f"SelectorEngine initialized (strategy: {strategy})")

    @classmethod
    def from_config(cls, config: 'Config') -> 'SelectorEngine':
        """
        Create an engine from the "engine" section of a configuration.

        Args:
            config: The configuration to read

        Returns:
            The configured engine
        """
        return cls(
            strategy=config.get('engine.strategy', RECURSIVE),
            log_timing=bool(config.get('engine.log_timing', False)),
        )

    def select(self, node: 'Node', path: Union[Path, Iterable[Any]]) -> List['Element']:
        """
        Find all elements reached from node by following path.

        Args:
            node: The node to start from (a Document or an Element)
            path: A Path, or an iterable of steps or step literals

        Returns:
            The matched elements in document order

        Raises:
            MalformedPath: If the path has no steps
            PredicateFailure: If a predicate function raised; the selection
                is abandoned and no partial result is returned
        """
        steps = Path.of(path).steps

        perf = PerformanceLogger(logger, "SelectorEngine") if self.log_timing else None
        if perf:
            perf.start("select")

        try:
            if self.strategy == ITERATIVE:
                result = self._select_iterative(node, steps)
            else:
                result = self._select_recursive(node, steps, 0)
        except PredicateFailure as e:
            # Nested selections share one failure; report it once.
            if not e.logged:
                log_exception(logger, e, "Selection aborted")
                e.logged = True
            raise

        if perf:
            perf.end("select")

        logger.debug(f"Path of {len(steps)} step(s) matched {len(result)} element(s)")
        return result

    def _candidates(self, node: 'Node', step: Step) -> List['Element']:
        """
        Get the element children of a node that match a step.

        Args:
            node: The parent node
            step: The step to test

        Returns:
            The matching children in child order
        """
        return [child for child in node.child_nodes
                if child.is_element and matches(child, step)]

    def _select_recursive(self, node: 'Node', steps: Sequence[Step], index: int) -> List['Element']:
        candidates = self._candidates(node, steps[index])

        if index == len(steps) - 1:
            return candidates

        result: List['Element'] = []
        for candidate in candidates:
            result.extend(self._select_recursive(candidate, steps, index + 1))
        return result

    def _select_iterative(self, node: 'Node', steps: Sequence[Step]) -> List['Element']:
        # Each level keeps the order of its parents, so the last level is in
        # the same order as the recursive walk produces.
        frontier: List['Node'] = [node]
        for step in steps:
            next_frontier: List['Element'] = []
            for current in frontier:
                next_frontier.extend(self._candidates(current, step))
            if not next_frontier:
                return []
            frontier = next_frontier
        return frontier


_default_engine: Optional[SelectorEngine] = None


def get_default_engine() -> SelectorEngine:
    """Get the engine used by the module-level select()."""
    global _default_engine
    if _default_engine is None:
        _default_engine = SelectorEngine()
    return _default_engine


def select(node: 'Node', path: Union[Path, Iterable[Any]]) -> List['Element']:
    """
    Find all elements reached from node by following path.

    Args:
        node: The node to start from
        path: A Path, or an iterable of steps or step literals

    Returns:
        The matched elements in document order
    """
    return get_default_engine().select(node, path)
