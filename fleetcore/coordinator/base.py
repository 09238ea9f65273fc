"""The policy model and the coordinator interface."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Policy:
    """A revision of a policy an agent is attached to."""

    policy_id: str = ""
    coordinator_idx: int = 0
    revision_idx: int = 0
    data: bytes = b""
    default_fleet_server: bool = False
    timestamp: str = ""
    unenroll_timeout: int = 0


class Coordinator(ABC):
    """Processes a policy and produces new coordinated policy revisions."""

    @abstractmethod
    def name(self) -> str:
        """The name of the coordinator."""

    @abstractmethod
    async def run(self) -> None:
        """Run the coordinator until the task is cancelled."""

    @abstractmethod
    async def update(self, policy: Policy) -> None:
        """Signal that a new policy revision has been defined."""

    @abstractmethod
    def output(self) -> "asyncio.Queue[Policy]":
        """Queue of updated coordinated policies."""