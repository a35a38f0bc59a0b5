"""Tests for the tick-driven event scheduler."""

import pytest

from games.AlienWave.game.scheduler import EventScheduler, monotonic_ms


def recorder(log):
    def effect(owner, now):
        log.append((owner, now))
    return effect


@pytest.fixture
def owners():
    return {1: "one", 2: "two", 3: "three"}


def test_nothing_fires_early(owners):
    """Test nothing fires early."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(100.0, 1, recorder(fired))
    assert scheduler.run_due(99.9, owners.get) == 0
    assert fired == []
    assert len(scheduler) == 1


def test_fires_in_time_order(owners):
    """Test fires in time order."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(300.0, 3, recorder(fired))
    scheduler.schedule(100.0, 1, recorder(fired))
    scheduler.schedule(200.0, 2, recorder(fired))
    assert scheduler.run_due(1000.0, owners.get) == 3
    assert [owner for owner, _ in fired] == ["one", "two", "three"]
    assert len(scheduler) == 0


def test_ties_fire_in_schedule_order(owners):
    """Test ties fire in schedule order."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(100.0, 2, recorder(fired))
    scheduler.schedule(100.0, 1, recorder(fired))
    scheduler.run_due(100.0, owners.get)
    assert [owner for owner, _ in fired] == ["two", "one"]


def test_cancel_removes_all_entries_for_handle(owners):
    """Test cancel removes all entries for handle."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(100.0, 1, recorder(fired))
    scheduler.schedule(200.0, 1, recorder(fired))
    scheduler.schedule(150.0, 2, recorder(fired))
    assert scheduler.cancel(1) == 2
    assert scheduler.pending_for(1) == 0
    scheduler.run_due(1000.0, owners.get)
    assert fired == [("two", 1000.0)]


def test_cancel_unknown_handle_is_noop():
    """Test cancel unknown handle is noop."""
    scheduler = EventScheduler()
    assert scheduler.cancel(42) == 0


def test_unresolved_handles_are_dropped():
    """Test unresolved handles are dropped."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(100.0, 9, recorder(fired))
    assert scheduler.run_due(200.0, {}.get) == 0
    assert fired == []
    assert len(scheduler) == 0


def test_shift_delays_everything(owners):
    """Test shift delays everything."""
    fired = []
    scheduler = EventScheduler()
    scheduler.schedule(100.0, 1, recorder(fired))
    scheduler.shift(500.0)
    assert scheduler.next_fire_at == 600.0
    assert scheduler.run_due(599.0, owners.get) == 0
    assert scheduler.run_due(600.0, owners.get) == 1


def test_effect_can_reschedule(owners):
    """Test effect can reschedule."""
    fired = []
    scheduler = EventScheduler()

    def periodic(owner, now):
        fired.append(now)
        scheduler.schedule(now + 100.0, 1, periodic)

    scheduler.schedule(100.0, 1, periodic)
    scheduler.run_due(150.0, owners.get)
    assert fired == [150.0]
    assert scheduler.next_fire_at == 250.0


def test_clear_and_empty_next_fire_at():
    """Test clear and empty next fire at."""
    scheduler = EventScheduler()
    scheduler.schedule(1.0, 1, lambda owner, now: None)
    scheduler.clear()
    assert len(scheduler) == 0
    assert scheduler.next_fire_at is None


def test_monotonic_ms_moves_forward():
    """Test monotonic ms moves forward."""
    first = monotonic_ms()
    assert monotonic_ms() >= first
