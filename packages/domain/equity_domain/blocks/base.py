"""Base classes for computation blocks.

This module provides the foundation for the blocks architecture:
- BlockContext, a keyed store blocks read from and write to
- Block abstract base class
- topological_sort, ordering blocks so producers run before consumers
- BlockExecutor, which runs a set of blocks against a context
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


# =============================================================================
# Block Context
# =============================================================================

@dataclass
class BlockContext:
    """Keyed values shared between blocks during one execution.

    Example:
        context = BlockContext()
        context.set("equity_snapshot", snapshot)

        EquityDistributionBlock().execute(context)
        by_participant = context.get("equity_by_participant")
    """

    _data: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        """Return the value stored under `key`.

        Raises:
            KeyError: If nothing has been stored under `key`
        """
        if key not in self._data:
            raise KeyError(f"Key '{key}' not found in context. Available keys: {self.keys()}")
        return self._data[key]

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> List[str]:
        return list(self._data.keys())


# =============================================================================
# Block Base Class
# =============================================================================

class Block(ABC):
    """A computation unit with declared inputs and outputs.

    Subclasses name the context keys they read (`inputs`) and write
    (`outputs`); the executor uses these declarations to order blocks and to
    check that every declared output was actually produced.

    Subclass example:
        class SummaryBlock(Block):
            def inputs(self) -> List[str]:
                return ["equity_by_participant"]

            def outputs(self) -> List[str]:
                return ["equity_total"]

            def execute(self, context: BlockContext) -> None:
                df = context.get("equity_by_participant")
                context.set("equity_total", df["final_equity"].sum())
    """

    @abstractmethod
    def inputs(self) -> List[str]:
        """Context keys this block reads."""

    @abstractmethod
    def outputs(self) -> List[str]:
        """Context keys this block writes."""

    @abstractmethod
    def execute(self, context: BlockContext) -> None:
        """Read inputs from `context`, compute, write outputs to `context`."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(inputs={self.inputs()}, outputs={self.outputs()})"


# =============================================================================
# Dependency Resolution
# =============================================================================

class CircularDependencyError(Exception):
    """Raised when blocks depend on each other in a cycle."""


def topological_sort(blocks: List[Block]) -> List[Block]:
    """Order blocks so every block runs after the blocks producing its inputs.

    Inputs that no block produces are expected to be seeded in the context.

    Raises:
        ValueError: If two blocks declare the same output
        CircularDependencyError: If the dependency graph has a cycle
    """
    producers: Dict[str, Block] = {}
    for block in blocks:
        for key in block.outputs():
            if key in producers:
                raise ValueError(
                    f"Multiple blocks produce '{key}': {producers[key]} and {block}"
                )
            producers[key] = block

    pending: Dict[Block, int] = {block: 0 for block in blocks}
    consumers: Dict[Block, List[Block]] = {block: [] for block in blocks}

    for block in blocks:
        for key in block.inputs():
            producer = producers.get(key)
            if producer is not None:
                consumers[producer].append(block)
                pending[block] += 1

    ready = deque(block for block in blocks if pending[block] == 0)
    ordered: List[Block] = []

    while ready:
        block = ready.popleft()
        ordered.append(block)
        for consumer in consumers[block]:
            pending[consumer] -= 1
            if pending[consumer] == 0:
                ready.append(consumer)

    if len(ordered) != len(blocks):
        stuck = [block for block in blocks if pending[block] > 0]
        raise CircularDependencyError(f"Circular dependency detected among blocks: {stuck}")

    return ordered


# =============================================================================
# Block Executor
# =============================================================================

class BlockExecutor:
    """Runs blocks in dependency order against a shared context.

    Example:
        executor = BlockExecutor([
            ResponsibilityBreakdownBlock(),
            EquityDistributionBlock(),
        ])
        context = BlockContext()
        context.set("equity_snapshot", snapshot)
        executor.execute(context)

        context.get("equity_by_participant")
        context.get("responsibility_breakdown")
    """

    def __init__(self, blocks: List[Block]):
        self.blocks = blocks
        self._ordered: Optional[List[Block]] = None

    def execute(self, context: BlockContext) -> BlockContext:
        """Execute every block and return the populated context.

        Raises:
            CircularDependencyError: If blocks depend on each other in a cycle
            KeyError: If a block's input is missing from the context
            ValueError: If a block does not write one of its declared outputs
        """
        if self._ordered is None:
            self._ordered = topological_sort(self.blocks)

        for block in self._ordered:
            for key in block.inputs():
                if not context.has(key):
                    raise KeyError(
                        f"Block {block} requires input '{key}' but it's not in context. "
                        f"Available keys: {context.keys()}"
                    )

            logger.debug("Executing %r", block)
            block.execute(context)

            for key in block.outputs():
                if not context.has(key):
                    raise ValueError(
                        f"Block {block} declared output '{key}' but didn't write it to context"
                    )

        return context
