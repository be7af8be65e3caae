import logging

import pytest

from letterboxed.metrics import SearchMetrics


def test_stage_and_counts_in_report(caplog):
    caplog.set_level(logging.INFO, logger="letterboxed")
    metrics = SearchMetrics("ABC,DEF,GHI,JKL")
    with metrics.stage("count_solutions"):
        assert metrics.record("solutions", 4) == 4
    metrics.record("valid_word_count", 30)

    report = metrics.report()
    assert report["letters"] == "ABC,DEF,GHI,JKL"
    assert report["solutions"] == 4
    assert report["valid_word_count"] == 30
    assert set(report["stage_timings"]) == {"count_solutions", "total"}
    assert "box=ABC,DEF,GHI,JKL solutions=4" in caplog.text
    assert "box=ABC,DEF,GHI,JKL stage=count_solutions" in caplog.text


def test_stage_timed_when_it_raises():
    metrics = SearchMetrics("ABC,DEF,GHI,JKL")
    with pytest.raises(OSError):
        with metrics.stage("load_dictionary"):
            raise OSError("missing")
    assert "load_dictionary" in metrics.timings
    assert metrics.counts == {}
