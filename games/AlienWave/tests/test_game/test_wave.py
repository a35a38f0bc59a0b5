"""
Comprehensive tests for WaveController.

Tests cover:
- Spawning the batch once per wave
- Success, failure and clear outcomes (failure checked first)
- Wave progression through continue_wave
- Pause and resume preserving the countdown, timers and death animations
- Reset back to wave 1
"""

import pytest

from models import Lifecycle, TargetConfig, WaveConfig, WaveOutcome
from games.AlienWave.game.wave import WaveController


@pytest.fixture
def wave(playfield, target_config, rng):
    return WaveController(WaveConfig(), target_config, playfield, rng=rng)


@pytest.fixture
def short_wave(short_waves, playfield, target_config, rng):
    return WaveController(short_waves, target_config, playfield, rng=rng)


def hit_all(wave, now):
    for target in wave.targets:
        target.hit(now)


# ============================================================================
# Spawning
# ============================================================================


class TestSpawning:
    """Test batch creation."""

    def test_initial_state(self, wave):
        """Test initial state."""
        assert wave.wave_number == 1
        assert wave.wave_size == 4
        assert wave.time_budget_ms == pytest.approx(60000.0)
        assert wave.outcome == WaveOutcome.ACTIVE
        assert wave.targets == []
        assert not wave.spawned

    def test_first_update_spawns_batch(self, wave):
        """Test first update spawns batch."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        assert len(wave.targets) == 4
        assert wave.spawned
        assert wave.live_count == 4
        assert wave.active_count == 4

    def test_spawn_wave_only_once(self, wave):
        """Test spawn wave only once."""
        wave.start(now=0.0)
        assert wave.spawn_wave(now=0.0) == 4
        assert wave.spawn_wave(now=10.0) == 0
        assert len(wave.targets) == 4

    def test_handles_are_unique(self, wave):
        """Test handles are unique."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        handles = [t.handle for t in wave.targets]
        assert len(set(handles)) == 4
        for handle in handles:
            assert wave.lookup(handle) is not None

    def test_each_target_has_one_retarget_timer(self, wave):
        """Test each target has one retarget timer."""
        wave.start(now=0.0)
        for tick in range(1, 800):
            wave.update(now=tick * 16.0)
        for target in wave.targets:
            assert wave.scheduler.pending_for(target.handle) == 1

    def test_targets_stay_in_bounds(self, wave):
        """Test targets stay in bounds."""
        wave.start(now=0.0)
        for tick in range(1, 500):
            wave.update(now=tick * 16.0)
            for target in wave.targets:
                assert 0.0 <= target.position.x <= 740.0
                assert 0.0 <= target.position.y <= 540.0


# ============================================================================
# Outcomes
# ============================================================================


class TestOutcomes:
    """Test the wave state machine."""

    def test_success_after_all_targets_removed(self, wave):
        """Test success after all targets removed."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        hit_all(wave, now=100.0)

        wave.update(now=1100.0)

        assert wave.outcome == WaveOutcome.SUCCEEDED
        assert wave.targets == []

    def test_dying_targets_keep_wave_active(self, wave):
        """Test dying targets keep wave active."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        hit_all(wave, now=100.0)

        wave.update(now=500.0)

        assert wave.outcome == WaveOutcome.ACTIVE
        assert wave.live_count == 4
        assert wave.active_count == 0

    def test_no_respawn_while_dying(self, wave):
        """Test no respawn while dying."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        hit_all(wave, now=100.0)
        wave.update(now=1100.0)
        wave.update(now=1116.0)
        assert wave.targets == []
        assert wave.outcome == WaveOutcome.SUCCEEDED

    def test_failure_at_exact_budget(self, short_wave):
        """Test failure at exact budget."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)

        short_wave.update(now=999.0)
        assert short_wave.outcome == WaveOutcome.ACTIVE

        short_wave.update(now=1000.0)
        assert short_wave.outcome == WaveOutcome.FAILED
        assert short_wave.targets == []
        assert len(short_wave.scheduler) == 0

    def test_dying_target_at_timeout_fails(self, short_wave):
        """Test dying target at timeout fails."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)
        hit_all(short_wave, now=500.0)

        short_wave.update(now=1000.0)

        assert short_wave.outcome == WaveOutcome.FAILED

    def test_timeout_with_nothing_left_succeeds(self, short_wave):
        """Test timeout with nothing left succeeds."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)
        hit_all(short_wave, now=16.0)

        short_wave.update(now=1016.0)

        assert short_wave.outcome == WaveOutcome.SUCCEEDED

    def test_failed_is_terminal(self, short_wave):
        """Test failed is terminal."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)
        short_wave.update(now=1000.0)

        short_wave.update(now=2000.0)

        assert short_wave.outcome == WaveOutcome.FAILED
        assert short_wave.targets == []
        assert short_wave.continue_wave(now=2000.0) is False

    def test_last_wave_clears(self, short_wave):
        """Test last wave clears."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)
        hit_all(short_wave, now=16.0)
        short_wave.update(now=1016.0)
        assert short_wave.continue_wave(now=1100.0)

        short_wave.update(now=1116.0)
        assert short_wave.wave_number == 2
        assert len(short_wave.targets) == 2
        hit_all(short_wave, now=1200.0)
        short_wave.update(now=2200.0)

        assert short_wave.outcome == WaveOutcome.CLEARED
        assert short_wave.continue_wave(now=2300.0) is False
        short_wave.update(now=2400.0)
        assert short_wave.targets == []

    def test_status_view(self, wave):
        """Test status view."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        status = wave.status(now=15000.0)
        assert status.wave_number == 1
        assert status.total_waves == 20
        assert status.wave_size == 4
        assert status.time_remaining_ms == pytest.approx(45000.0)
        assert status.active_count == 4
        assert status.outcome == WaveOutcome.ACTIVE

    def test_time_remaining_never_negative(self, wave):
        """Test time remaining never negative."""
        wave.start(now=0.0)
        assert wave.time_remaining_ms(now=100000.0) == 0.0


# ============================================================================
# Progression
# ============================================================================


class TestContinueWave:
    """Test advancing to the next wave."""

    def _succeed(self, wave):
        wave.start(now=0.0)
        wave.update(now=16.0)
        hit_all(wave, now=100.0)
        wave.update(now=1100.0)
        assert wave.outcome == WaveOutcome.SUCCEEDED

    def test_continue_starts_next_wave(self, wave):
        """Test continue starts next wave."""
        self._succeed(wave)

        assert wave.continue_wave(now=2000.0) is True

        assert wave.wave_number == 2
        assert wave.wave_size == 8
        assert wave.time_budget_ms == pytest.approx(60000.0 - 40000.0 / 19)
        assert wave.outcome == WaveOutcome.ACTIVE
        assert wave.wave_started_at == 2000.0
        assert not wave.spawned

    def test_next_batch_spawns_on_update(self, wave):
        """Test next batch spawns on update."""
        self._succeed(wave)
        wave.continue_wave(now=2000.0)
        wave.update(now=2016.0)
        assert len(wave.targets) == 8

    def test_continue_ignored_while_active(self, wave):
        """Test continue ignored while active."""
        wave.start(now=0.0)
        assert wave.continue_wave(now=10.0) is False
        assert wave.wave_number == 1

    def test_waiting_for_continue_does_nothing(self, wave):
        """Test waiting for continue does nothing."""
        self._succeed(wave)
        wave.update(now=90000.0)
        assert wave.outcome == WaveOutcome.SUCCEEDED
        assert wave.targets == []


# ============================================================================
# Pause / resume
# ============================================================================


class TestPauseResume:
    """Test that pausing freezes the countdown exactly."""

    def test_remaining_time_frozen_while_paused(self, wave):
        """Test remaining time frozen while paused."""
        wave.start(now=0.0)
        wave.update(now=16.0)

        wave.pause(now=20000.0)
        assert wave.is_paused
        assert wave.time_remaining_ms(now=50000.0) == pytest.approx(40000.0)

        wave.resume(now=70000.0)
        assert not wave.is_paused
        assert wave.time_remaining_ms(now=70000.0) == pytest.approx(40000.0)
        assert wave.time_remaining_ms(now=80000.0) == pytest.approx(30000.0)

    def test_update_ignored_while_paused(self, wave):
        """Test update ignored while paused."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        before = [t.position for t in wave.targets]

        wave.pause(now=100.0)
        wave.update(now=200000.0)

        assert wave.outcome == WaveOutcome.ACTIVE
        assert [t.position for t in wave.targets] == before

    def test_resume_shifts_timers(self, wave):
        """Test resume shifts timers."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        next_fire = wave.scheduler.next_fire_at

        wave.pause(now=1000.0)
        wave.resume(now=6000.0)

        assert wave.scheduler.next_fire_at == pytest.approx(next_fire + 5000.0)

    def test_resume_rebases_dying_targets(self, wave):
        """Test resume rebases dying targets."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        target = wave.targets[0]
        target.hit(now=100.0)

        wave.pause(now=200.0)
        wave.resume(now=5200.0)

        wave.update(now=5600.0)
        assert target.lifecycle == Lifecycle.DYING
        wave.update(now=6100.0)
        assert target.lifecycle == Lifecycle.REMOVED
        assert target not in wave.targets

    def test_render_now_frozen_while_paused(self, wave):
        """Test render now frozen while paused."""
        wave.start(now=0.0)
        assert wave.render_now(now=300.0) == 300.0
        wave.pause(now=1000.0)
        assert wave.render_now(now=9000.0) == 1000.0
        wave.resume(now=9000.0)
        assert wave.render_now(now=9500.0) == 9500.0

    def test_dying_fade_does_not_advance_while_paused(self, wave):
        """Test dying fade does not advance while paused."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        target = wave.targets[0]
        target.hit(now=100.0)

        wave.pause(now=200.0)
        assert target.alpha(wave.render_now(now=200.0)) == pytest.approx(0.9)
        assert target.alpha(wave.render_now(now=5200.0)) == pytest.approx(0.9)

        wave.resume(now=5200.0)
        assert target.alpha(wave.render_now(now=5200.0)) == pytest.approx(0.9)
        assert target.alpha(wave.render_now(now=5600.0)) == pytest.approx(0.5)

    def test_double_pause_keeps_first(self, wave):
        """Test double pause keeps first."""
        wave.start(now=0.0)
        wave.pause(now=1000.0)
        wave.pause(now=5000.0)
        wave.resume(now=6000.0)
        assert wave.time_remaining_ms(now=6000.0) == pytest.approx(59000.0)

    def test_resume_without_pause_is_noop(self, wave):
        """Test resume without pause is noop."""
        wave.start(now=0.0)
        wave.resume(now=5000.0)
        assert wave.wave_started_at == 0.0


# ============================================================================
# Reset
# ============================================================================


class TestReset:
    """Test restarting from wave 1."""

    def test_reset_after_failure(self, short_wave):
        """Test reset after failure."""
        short_wave.start(now=0.0)
        short_wave.update(now=16.0)
        short_wave.update(now=1000.0)
        assert short_wave.outcome == WaveOutcome.FAILED

        short_wave.reset(now=3000.0)

        assert short_wave.outcome == WaveOutcome.ACTIVE
        assert short_wave.wave_number == 1
        assert short_wave.wave_size == 1
        assert short_wave.targets == []
        assert short_wave.wave_started_at == 3000.0
        short_wave.update(now=3016.0)
        assert len(short_wave.targets) == 1

    def test_reset_destroys_live_targets(self, wave):
        """Test reset destroys live targets."""
        wave.start(now=0.0)
        wave.update(now=16.0)
        targets = list(wave.targets)

        wave.reset(now=100.0)

        assert all(t.lifecycle == Lifecycle.REMOVED for t in targets)
        assert len(wave.scheduler) == 0
        assert wave.lookup(targets[0].handle) is None

    def test_reset_clears_pause(self, wave):
        """Test reset clears pause."""
        wave.start(now=0.0)
        wave.pause(now=100.0)
        wave.reset(now=200.0)
        assert not wave.is_paused


class TestSizing:
    """Test wave sizing through progression."""

    def test_custom_config_progression(self, playfield, rng):
        """Test custom config progression."""
        config = WaveConfig(total_waves=3, base_size=2, increment=3,
                            max_budget_ms=10000, min_budget_ms=4000)
        wave = WaveController(config, TargetConfig(), playfield, rng=rng)
        wave.start(now=0.0)
        sizes = []
        now = 0.0
        for _ in range(3):
            now += 16.0
            wave.update(now)
            sizes.append(len(wave.targets))
            hit_all(wave, now)
            now += 1000.0
            wave.update(now)
            wave.continue_wave(now)
        assert sizes == [2, 5, 8]
        assert wave.outcome == WaveOutcome.CLEARED
