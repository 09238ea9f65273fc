import asyncio
import dataclasses

import pytest

from fleetcore.coordinator.base import Coordinator, Policy


class _Recorder(Coordinator):
    def __init__(self):
        self.seen = []
        self._out = asyncio.Queue()

    def name(self):
        return "recorder"

    async def run(self):
        await asyncio.Event().wait()

    async def update(self, policy):
        self.seen.append(policy)
        await self._out.put(policy)

    def output(self):
        return self._out


class _Partial(Coordinator):
    def name(self):
        return "partial"


def test_coordinator_is_abstract():
    with pytest.raises(TypeError):
        Coordinator()
    with pytest.raises(TypeError):
        _Partial()


@pytest.mark.asyncio
async def test_subclass_round_trip():
    rec = _Recorder()
    policy = Policy(policy_id="p", revision_idx=2, data=b"{}")
    await rec.update(policy)
    assert rec.seen == [policy]
    assert await rec.output().get() is policy
    assert rec.name() == "recorder"


def test_policy_defaults_and_immutability():
    policy = Policy(policy_id="p")
    assert policy.coordinator_idx == 0
    assert policy.data == b""
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.revision_idx = 3


def test_policy_replace_keeps_other_fields():
    policy = Policy(policy_id="p", revision_idx=4, data=b"{}")
    bumped = dataclasses.replace(policy, coordinator_idx=policy.coordinator_idx + 1)
    assert bumped.coordinator_idx == policy.coordinator_idx + 1
    assert (bumped.policy_id, bumped.revision_idx, bumped.data) == (policy.policy_id, policy.revision_idx, policy.data)
    assert bumped != policy