from checklist.reminder import ReminderScheduler


def _armed(clock, delay=5.0):
    r = ReminderScheduler(delay, clock=clock)
    r.arm()
    return r


def test_hidden_before_delay_shown_after(clock):
    r = _armed(clock)
    clock.advance(4.9)
    assert r.poll() is False
    clock.advance(0.2)
    assert r.poll() is True
    clock.advance(60)
    assert r.poll() is True


def test_shown_exactly_at_deadline(clock):
    r = _armed(clock)
    clock.advance(5.0)
    assert r.poll() is True


def test_interaction_before_expiry_keeps_banner_hidden(clock):
    r = _armed(clock)
    clock.advance(2.0)
    r.mark_interacted()
    assert not r.armed
    clock.advance(3.0)
    assert r.poll() is False
    clock.advance(100)
    assert r.poll() is False


def test_late_interaction_does_not_hide(clock):
    r = _armed(clock)
    clock.advance(5.0)
    assert r.poll()
    r.mark_interacted()
    assert r.visible


def test_dismiss_hides_and_never_reshows(clock):
    r = _armed(clock)
    clock.advance(5.0)
    r.poll()
    r.dismiss()
    assert not r.visible
    r.arm()
    clock.advance(10.0)
    assert r.poll() is False


def test_disarm_prevents_firing(clock):
    r = _armed(clock)
    clock.advance(1.0)
    r.disarm()
    clock.advance(10.0)
    assert r.poll() is False
    assert not r.disclosed


def test_arm_is_idempotent(clock):
    r = _armed(clock)
    clock.advance(3.0)
    r.arm()
    clock.advance(2.0)
    assert r.poll() is True


def test_fires_at_most_once(clock):
    r = _armed(clock)
    clock.advance(5.0)
    r.poll()
    r.poll()
    assert r.disclosed
    assert not r.armed


def test_remaining(clock):
    r = ReminderScheduler(5.0, clock=clock)
    assert r.remaining() is None
    r.arm()
    clock.advance(1.5)
    assert r.remaining() == 3.5


def test_default_delay_from_config(monkeypatch, clock):
    from checklist import config
    monkeypatch.setattr(config, "REMINDER_DELAY_SECONDS", 0.25)
    r = ReminderScheduler(clock=clock)
    assert r.delay == 0.25
