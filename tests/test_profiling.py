"""Phase timing is recorded only while the profiler is enabled."""

from __future__ import annotations

from growth import GrowthConfig, GrowthEngine
from growth.profiling import profiler


def test_profiler_records_engine_phases_when_enabled() -> None:
    profiler.reset()
    profiler.enable(report_at_exit=False)
    try:
        engine = GrowthEngine(GrowthConfig(random_seed=0))
        engine.begin_growth()
        engine.step_growth()

        names = {row[0] for row in profiler.summary()}
    finally:
        profiler.disable()
        profiler.reset()

    assert "GrowthEngine.rebuild_index" in names
    assert "GrowthEngine._apply_forces" in names
    assert "split_edges" in names
    assert "prune_nodes" in names


def test_profiler_is_silent_when_disabled() -> None:
    profiler.reset()
    engine = GrowthEngine(GrowthConfig(random_seed=0))
    engine.begin_growth()
    engine.step_growth()

    assert profiler.summary() == []


def test_profiling_stays_with_the_engine_that_asked_for_it() -> None:
    profiler.reset()
    try:
        profiled = GrowthEngine(GrowthConfig(random_seed=0, profile=True))
        profiled.begin_growth()
        profiled.step_growth()

        assert profiler.summary() != []
        assert not profiler.enabled

        profiler.reset()
        plain = GrowthEngine(GrowthConfig(random_seed=0))
        plain.begin_growth()
        plain.step_growth()
        profiled.reconfigure(GrowthConfig(random_seed=0, profile=False))
        profiled.begin_growth()
        profiled.step_growth()

        assert profiler.summary() == []
    finally:
        profiler.disable()
        profiler.reset()
