from arcfill.config import ViewConfig
from arcfill.events.bus import EVENT_ANIMATOR_STARTED, EVENT_ANIMATOR_STOPPED, EVENT_FRAME_STEPPED, EVENT_TICK
from tests.helpers import build_view, drive, run_until_idle


def test_ticks_do_nothing_while_stopped():
    view = build_view()
    view.chain.start_updating()
    drive(view.bus, 10)
    assert view.chain.node_state(0).scale == 0.0
    assert not view.animator.is_animating


def test_start_and_stop_are_idempotent():
    view = build_view()
    started, stopped = [], []
    view.bus.subscribe(EVENT_ANIMATOR_STARTED, lambda sender, **k: started.append(k))
    view.bus.subscribe(EVENT_ANIMATOR_STOPPED, lambda sender, **k: stopped.append(k))
    view.animator.start()
    view.animator.start()
    assert view.animator.is_animating
    view.animator.stop()
    view.animator.stop()
    assert not view.animator.is_animating
    assert len(started) == 1
    assert stopped == [{"frames": 0}]


def test_steps_follow_frame_delay():
    view = build_view(ViewConfig(frame_delay=0.1))
    frames = []
    view.bus.subscribe(EVENT_FRAME_STEPPED, lambda sender, **k: frames.append(k))
    view.chain.start_updating()
    view.animator.start()
    view.bus.emit(EVENT_TICK, dt=0.05)
    assert frames == []
    view.bus.emit(EVENT_TICK, dt=0.05)
    assert len(frames) == 1
    # Two whole frames fit in 0.25s; the remainder carries over.
    view.bus.emit(EVENT_TICK, dt=0.25)
    assert len(frames) == 3
    view.bus.emit(EVENT_TICK, dt=0.06)
    assert len(frames) == 4


def test_long_stall_is_capped():
    config = ViewConfig(frame_delay=0.1, max_steps_per_tick=4)
    view = build_view(config)
    view.chain.start_updating()
    view.animator.start()
    frames = []
    view.bus.subscribe(EVENT_FRAME_STEPPED, lambda sender, **k: frames.append(k))
    view.bus.emit(EVENT_TICK, dt=5.0)
    assert len(frames) == 4
    # Backlog is dropped, so the next short tick does not step.
    view.bus.emit(EVENT_TICK, dt=0.05)
    assert len(frames) == 4


def test_invalid_dt_is_ignored():
    view = build_view()
    view.chain.start_updating()
    view.animator.start()
    view.bus.emit(EVENT_TICK, dt="soon")
    view.bus.emit(EVENT_TICK, dt=-1.0)
    view.bus.emit(EVENT_TICK, dt=None)
    assert view.chain.node_state(0).scale == 0.0


def test_animator_stops_when_node_settles():
    view = build_view()
    stopped = []
    view.bus.subscribe(EVENT_ANIMATOR_STOPPED, lambda sender, **k: stopped.append(k))
    view.chain.start_updating()
    view.animator.start()
    run_until_idle(view)
    assert view.chain.node_state(0).committed_scale == 1.0
    assert view.chain.current_index == 1
    assert len(stopped) == 1
    assert stopped[0]["frames"] > 0
    # No further progress once stopped.
    drive(view.bus, 10)
    assert view.chain.node_state(1).scale == 0.0


def test_frame_events_report_progress():
    view = build_view()
    frames = []
    view.bus.subscribe(EVENT_FRAME_STEPPED, lambda sender, **k: frames.append(k))
    view.chain.start_updating()
    view.animator.start()
    drive(view.bus, 3)
    assert [f["index"] for f in frames] == [0, 0, 0]
    scales = [f["scale"] for f in frames]
    assert scales == sorted(scales)
