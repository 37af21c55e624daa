"""
Population container for cell agents.

Writes are deferred: ``append`` only stages an agent, and staged agents
become visible to iteration and queries after ``commit``. A simulation step
reads a stable snapshot and merges every new agent at a single point.
"""

import threading
from typing import Iterator, Optional

from .agent import CellAgent
from .errors import InvalidArgument
from .lineage import CellType, as_cell_type


class Population:
    """
    Owner of all agents in a simulation.

    Attributes:
        reserved: Size hint for the batch currently being staged
    """

    def __init__(self) -> None:
        self._agents: list[CellAgent] = []
        self._pending: list[CellAgent] = []
        self._next_uid = 0
        self._lock = threading.Lock()
        self.reserved = 0

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[CellAgent]:
        return iter(tuple(self._agents))

    @property
    def agents(self) -> tuple[CellAgent, ...]:
        """Committed agents, in uid order."""
        return tuple(self._agents)

    @property
    def pending_count(self) -> int:
        """Number of staged, uncommitted agents."""
        return len(self._pending)

    def get(self, uid: int) -> Optional[CellAgent]:
        """Committed agent with the given uid, or None."""
        if 0 <= uid < len(self._agents):
            return self._agents[uid]
        return None

    def get_by_type(self, cell_type) -> list[CellAgent]:
        """
        Committed agents of one differentiation type.

        Args:
            cell_type: CellType, integer code or label

        Returns:
            Matching agents in uid order
        """
        wanted = as_cell_type(cell_type)
        return [agent for agent in self._agents if agent.cell_type == wanted]

    def count_by_type(self) -> dict[CellType, int]:
        """Number of committed agents for every type."""
        counts = {cell_type: 0 for cell_type in CellType}
        for agent in self._agents:
            counts[agent.cell_type] += 1
        return counts

    def reserve(self, count: int) -> None:
        """
        Announce the size of the next staged batch.

        Args:
            count: Expected number of appended agents

        Raises:
            InvalidArgument: If count is negative
        """
        if count < 0:
            raise InvalidArgument(f"cannot reserve a negative count, got {count}")
        self.reserved = count

    def append(self, agent: CellAgent) -> None:
        """Stage an agent for the next commit. Safe to call from worker threads."""
        if not isinstance(agent, CellAgent):
            raise InvalidArgument(f"population only holds CellAgent, got {type(agent).__name__}")
        with self._lock:
            self._pending.append(agent)

    def commit(self) -> int:
        """
        Make all staged agents visible.

        Staged agents are ordered by mother uid (seeded agents first, in
        staging order) before uids are assigned, so the result does not
        depend on the order worker threads staged them in.

        Returns:
            Number of agents committed
        """
        with self._lock:
            pending = sorted(
                self._pending,
                key=lambda a: -1 if a.parent_uid is None else a.parent_uid,
            )
            self._pending = []
            self.reserved = 0

        for agent in pending:
            agent.uid = self._next_uid
            self._next_uid += 1
            self._agents.append(agent)

        return len(pending)

    def discard(self) -> int:
        """Drop all staged agents without committing them."""
        with self._lock:
            dropped = len(self._pending)
            self._pending = []
            self.reserved = 0
        return dropped
