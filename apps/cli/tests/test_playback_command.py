"""Tests for the play command."""

import asyncio
from unittest.mock import patch

from typer.testing import CliRunner

from apps.cli.commands.playback import run_playback
from apps.cli.main import app
from packages.core import ManualClock
from packages.playback import PlaybackPhase, PlaybackScheduler

runner = CliRunner()


class TestRunPlayback:
    """Tests for the playback helper."""

    def test_waits_until_idle(self):
        clock = ManualClock()
        scheduler = PlaybackScheduler(clock=clock)
        phases = []
        scheduler.subscribe(lambda state: phases.append(state.phase))

        async def scenario():
            task = asyncio.create_task(run_playback(scheduler, ["HELLO", "YOU"]))
            await asyncio.sleep(0)
            clock.run_until_idle()
            return await task

        assert asyncio.run(scenario()) is True
        assert phases[-2:] == [PlaybackPhase.DONE, PlaybackPhase.IDLE]
        assert phases.count(PlaybackPhase.ATTACK) == 2
        assert clock.now_ms() == 2000

    def test_nothing_to_play(self):
        scheduler = PlaybackScheduler(clock=ManualClock())

        assert asyncio.run(run_playback(scheduler, [])) is False
        assert scheduler.state.phase is PlaybackPhase.IDLE


class TestPlayCommand:
    """Tests for the play command."""

    def test_plays_each_sign(self, translator):
        with patch("apps.cli.commands.playback.get_translator", return_value=translator):
            result = runner.invoke(app, ["play", "hello", "--speed", "4"])

        assert result.exit_code == 0
        assert "HELLO" in result.output
        assert "1 / 1" in result.output
        assert "Done" in result.output

    def test_blank_text(self, translator):
        with patch("apps.cli.commands.playback.get_translator", return_value=translator):
            result = runner.invoke(app, ["play", " "])

        assert result.exit_code == 1
        assert "Nothing to play" in result.output
