import pytest

from fishcore.debug import MAX_DEBUG_SLOTS, DebugStats


def _line(report, prefix):
    matches = [line for line in report.splitlines() if line.startswith(prefix)]
    assert len(matches) == 1
    return matches[0]


def test_empty_report():
    assert DebugStats().report() == ""


def test_hit_rate():
    stats = DebugStats()
    stats.hit_on(True)
    stats.hit_on(False)
    line = _line(stats.report(), "Hit #0")
    assert line == "Hit #0: Total 2 Hits 1 Hit Rate (%) 50"


def test_mean_of_constant_values():
    stats = DebugStats()
    stats.mean_of(7, slot=3)
    stats.mean_of(7, slot=3)
    assert _line(stats.report(), "Mean #3") == "Mean #3: Total 2 Mean 7"


def test_stdev_of_constant_is_zero():
    stats = DebugStats()
    for _ in range(5):
        stats.stdev_of(11, slot=1)
    assert _line(stats.report(), "Stdev #1") == "Stdev #1: Total 5 Stdev 0"


def test_extremes():
    stats = DebugStats()
    for value in (5, -3, 12, 0):
        stats.extremes_of(value, slot=2)
    assert _line(stats.report(), "Extremity #2") == "Extremity #2: Total 4 Min -3 Max 12"


def test_correlation_of_linear_data():
    stats = DebugStats()
    for x in range(1, 6):
        stats.correl_of(x, 2 * x + 1)
    line = _line(stats.report(), "Correl. #0")
    assert float(line.rsplit(" ", 1)[1]) == pytest.approx(1.0)


def test_report_orders_kinds_and_slots():
    stats = DebugStats()
    stats.mean_of(1, slot=5)
    stats.hit_on(True, slot=4)
    stats.hit_on(True, slot=1)
    prefixes = [line.split(":")[0] for line in stats.report().splitlines()]
    assert prefixes == ["Hit #1", "Hit #4", "Mean #5"]


def test_clear_resets_everything():
    stats = DebugStats()
    stats.hit_on(True)
    stats.extremes_of(9)
    stats.correl_of(1, 2)
    stats.clear()
    assert stats.report() == ""


@pytest.mark.parametrize("slot", [-1, MAX_DEBUG_SLOTS])
def test_slot_out_of_range(slot):
    stats = DebugStats()
    with pytest.raises(IndexError):
        stats.hit_on(True, slot)
    with pytest.raises(IndexError):
        stats.mean_of(1, slot)