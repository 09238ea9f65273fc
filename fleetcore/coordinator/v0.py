"""The version-zero coordinator: passes policies through, stamping a coordinator index."""

from __future__ import annotations

import asyncio
import dataclasses
import logging

from fleetcore.coordinator.base import Coordinator, Policy

_log = logging.getLogger(__name__)


class CoordinatorZero(Coordinator):
    """Takes a subscribed policy and outputs the same policy."""

    def __init__(self, policy: Policy) -> None:
        self._policy = policy
        self._in: "asyncio.Queue[Policy]" = asyncio.Queue(maxsize=1)
        self._out: "asyncio.Queue[Policy]" = asyncio.Queue(maxsize=1)

    def name(self) -> str:
        return "v0"

    async def run(self) -> None:
        await self._handle(self._policy)
        while True:
            await self._handle(await self._in.get())

    async def update(self, policy: Policy) -> None:
        await self._in.put(policy)

    def output(self) -> "asyncio.Queue[Policy]":
        return self._out

    async def _handle(self, policy: Policy) -> None:
        try:
            await self._update_policy(policy)
        except (ValueError, TypeError):
            _log.exception("failed to handle policy %s", policy.policy_id)

    async def _update_policy(self, policy: Policy) -> None:
        new_data = self._handle_policy(policy.data)
        if policy.coordinator_idx == 0 or new_data != policy.data:
            policy = dataclasses.replace(
                policy,
                coordinator_idx=policy.coordinator_idx + 1,
                data=new_data,
            )
            self._policy = policy
            await self._out.put(policy)

    @staticmethod
    def _handle_policy(data: bytes) -> bytes:
        # Version zero performs no coordination of the policy data.
        return data


def new_coordinator_zero(policy: Policy) -> CoordinatorZero:
    """Create a version-zero coordinator for a policy."""
    return CoordinatorZero(policy)