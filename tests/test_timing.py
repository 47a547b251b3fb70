from blockfall.game import GravityTimer


def test_fires_once_per_interval():
    timer = GravityTimer(lambda: 1000, now_ms=0)
    assert not timer.due(999)
    assert timer.due(1000)
    assert not timer.due(1500)
    assert timer.due(2000)


def test_interval_is_read_on_every_check():
    interval = [1000]
    timer = GravityTimer(lambda: interval[0], now_ms=0)
    interval[0] = 100
    assert timer.due(100)
    assert not timer.due(150)


def test_paused_time_does_not_count():
    timer = GravityTimer(lambda: 1000, now_ms=0)
    timer.pause(500)
    assert timer.paused
    assert not timer.due(5000)
    timer.resume(3500)
    assert not timer.paused
    assert not timer.due(3999)
    assert timer.due(4000)


def test_reset_restarts_the_interval():
    timer = GravityTimer(lambda: 500, now_ms=0)
    timer.reset(400)
    assert not timer.due(800)
    assert timer.due(900)
