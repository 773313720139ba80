"""
Unit tests for GameService command handlers.
"""

import pytest

from discord_game_muter.core.authorization import CommandRequest, GateVerdict
from discord_game_muter.core.results import MuteDirective, OutcomeKind

VOICE = 100
TEXT = 200
LEADER = 1


async def start_game(registry, leader=LEADER):
    session, _ = await registry.get_or_create(VOICE, creator_id=leader, text_channel_id=TEXT)
    return session


class TestGameService:
    """Test cases for GameService."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_commands_need_a_session(self, game_service):
        outcome = await game_service.play(VOICE, LEADER, [LEADER])

        assert outcome.kind is OutcomeKind.AUTHORIZATION_ERROR
        assert outcome.directives == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_commands_need_voice(self, game_service):
        outcome = await game_service.reset(None, LEADER, [])

        assert outcome.kind is OutcomeKind.AUTHORIZATION_ERROR

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_leader_is_rejected(self, game_service, registry):
        session = await start_game(registry)

        outcome = await game_service.kill(VOICE, 2, 3, [LEADER, 2, 3])

        assert outcome.kind is OutcomeKind.AUTHORIZATION_ERROR
        assert session.dead_members == set()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_play_and_discuss(self, game_service, registry):
        session = await start_game(registry)
        session.kill(3)

        played = await game_service.play(VOICE, LEADER, [LEADER, 2, 3])
        assert played.is_ok
        assert session.global_unmute is False
        assert {d.member_id for d in played.directives} == {LEADER, 2, 3}

        discussed = await game_service.discuss(VOICE, LEADER, [LEADER, 2, 3])
        assert discussed.is_ok
        assert session.global_unmute is True
        assert {d.member_id for d in discussed.directives} == {LEADER, 2}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_kill_then_revive_restores_unmute(self, game_service, registry):
        session = await start_game(registry)

        killed = await game_service.kill(VOICE, LEADER, 2, [LEADER, 2])
        assert killed.directives == [MuteDirective(2, True)]

        again = await game_service.kill(VOICE, LEADER, 2, [LEADER, 2])
        assert again.is_ok
        assert "already killed" in again.message
        assert again.directives == []

        revived = await game_service.revive(VOICE, LEADER, 2)
        assert revived.directives == [MuteDirective(2, False)]
        assert session.dead_members == set()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_revive_living_member_reports_not_killed(self, game_service, registry):
        await start_game(registry)

        outcome = await game_service.revive(VOICE, LEADER, 2)

        assert outcome.is_ok
        assert "not killed" in outcome.message
        assert outcome.directives == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_kill_requires_target_in_channel(self, game_service, registry):
        session = await start_game(registry)

        outcome = await game_service.kill(VOICE, LEADER, 9, [LEADER, 2])

        assert outcome.kind is OutcomeKind.ARGUMENT_ERROR
        assert session.dead_members == set()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reset(self, game_service, registry):
        session = await start_game(registry)
        session.mute_all([LEADER, 2])
        session.kill(2)

        outcome = await game_service.reset(VOICE, LEADER, [LEADER, 2])

        assert session.dead_members == set()
        assert session.global_unmute is True
        assert set(outcome.directives) == {
            MuteDirective(LEADER, False),
            MuteDirective(2, False),
        }


class TestSessionLifecycleScenario:
    """Leader, non-leader, departures and teardown end to end."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_full_scenario(self, gate, reactor, game_service, registry):
        leader, victim, other = 1, 2, 3
        roster = [leader, victim, other]

        # L becomes leader and kills M
        decision = await gate.evaluate(CommandRequest(leader, "kill", TEXT, VOICE))
        assert decision.verdict is GateVerdict.CREATED
        outcome = await game_service.kill(VOICE, leader, victim, roster)
        assert outcome.directives == [MuteDirective(victim, True)]
        session = await registry.get(VOICE)
        assert session.dead_members == {victim}

        # N is rejected, state unchanged
        rejected = await gate.evaluate(CommandRequest(other, "kill", TEXT, VOICE))
        assert not rejected.admitted
        assert session.dead_members == {victim}
        assert session.leader_id == leader

        # M leaves: dead flag cleared
        roster.remove(victim)
        await reactor.member_left(VOICE, victim, roster)
        assert session.dead_members == set()

        # L leaves while N remains: seat vacated, session kept
        roster.remove(leader)
        left = await reactor.member_left(VOICE, leader, roster)
        assert left.leader_vacated
        assert left.announcements
        assert VOICE in registry

        # N leaves: session removed
        roster.remove(other)
        closed = await reactor.member_left(VOICE, other, roster)
        assert closed.session_closed
        assert await registry.get(VOICE) is None
