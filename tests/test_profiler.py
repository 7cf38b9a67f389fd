import pytest

from intersect2d.profiler import Profiler
from intersect2d.kernel.slab import ray_intersects_rectangle


def test_sections_are_recorded():
    profiler = Profiler()
    for _ in range(5):
        with profiler.section("ray_aar"):
            ray_intersects_rectangle((-1.0, 0.5), (1.0, 0.0), (0.0, 0.0), (1.0, 1.0))
    with profiler.section("other"):
        pass

    summary = profiler.stats.summary()
    assert summary["ray_aar"]["n"] == 5
    assert summary["other"]["n"] == 1
    stats = summary["ray_aar"]
    assert stats["max_us"] >= stats["mean_us"] >= 0.0
    assert stats["total_ms"] == pytest.approx(5 * stats["mean_us"] / 1e3)

    profiler.stats.reset()
    assert profiler.stats.summary() == {}


def test_failing_section_is_recorded_and_reraised():
    profiler = Profiler()
    with pytest.raises(RuntimeError):
        with profiler.section("boom"):
            raise RuntimeError("fail")
    assert profiler.stats.summary()["boom"]["n"] == 1


def test_add_records_raw_samples():
    profiler = Profiler()
    profiler.stats.add("manual", 0.002)
    profiler.stats.add("manual", 0.004)
    stats = profiler.stats.summary()["manual"]
    assert stats["n"] == 2
    assert stats["total_ms"] == pytest.approx(6.0)
    assert stats["mean_us"] == pytest.approx(3000.0)
    assert stats["max_us"] == pytest.approx(4000.0)
