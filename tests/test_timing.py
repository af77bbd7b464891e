from novakit.timing import Milliseconds, Minutes, Seconds, Stopwatch, Timer


def test_timer_counts_down():
    timer = Timer(2.0)
    timer.update(0.5)
    assert timer.elapsed() == 0.5
    assert not timer.done()


def test_timer_done_after_duration():
    timer = Timer(1.0)
    timer.update(0.6)
    assert not timer.done()
    timer.update(0.6)
    assert timer.done()
    assert timer.elapsed() >= timer.duration


def test_timer_stops_counting_once_done():
    timer = Timer(1.0)
    timer.update(1.5)
    assert timer.done()
    timer.update(1.0)
    assert timer.elapsed() == 1.5


def test_timer_pause_and_unpause():
    timer = Timer(3.0)
    timer.update(1.0)
    before = timer.elapsed()
    timer.pause()
    assert timer.paused
    timer.update(1.0)
    assert timer.elapsed() == before
    timer.unpause()
    timer.update(1.0)
    assert timer.elapsed() > before


def test_timer_reset():
    timer = Timer(1.0)
    fresh = timer.elapsed()
    timer.update(2.0)
    assert timer.done()
    timer.reset()
    assert not timer.done()
    assert timer.elapsed() == fresh


def test_time_scales_truncate_to_whole_units():
    assert Milliseconds(1.5).value == 1500
    assert Minutes(120).value == 2
    assert Seconds(2.9).value == 2


def test_time_scale_equality_depends_on_type():
    assert Seconds(3.2) == Seconds(3.7)
    assert Seconds(1.0) != Milliseconds(1.0)


def test_stopwatch_accumulates():
    watch = Stopwatch()
    for _ in range(3):
        watch.tick(0.25)
    assert watch.seconds == 0.75
    assert watch.get(Milliseconds) == Milliseconds(0.75)
    assert watch.get(Seconds) == Seconds(0.75)


def test_stopwatch_pause_ignores_ticks():
    watch = Stopwatch()
    watch.tick(0.5)
    watch.pause()
    assert watch.paused
    watch.tick(10.0)
    assert watch.seconds == 0.5
    watch.unpause()
    watch.tick(0.5)
    assert watch.get(Seconds) == Seconds(1.0)