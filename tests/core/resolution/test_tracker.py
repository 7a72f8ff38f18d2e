# tests/core/resolution/test_tracker.py
"""
Testes do InclusionTracker.

Invariantes validadas:
    - Um caminho é registrado no máximo uma vez por run
    - A primeira origem nunca é sobrescrita
    - O registro cresce monotonicamente
"""

from gaeenv.core.resolution.tracker import InclusionTracker


def test_first_registration_is_new():
    tracker = InclusionTracker()
    assert tracker.register("<root>", "app.yaml") == (False, None)
    assert "app.yaml" in tracker
    assert tracker.origin_of("app.yaml") == "<root>"


def test_second_registration_reports_previous_origin():
    tracker = InclusionTracker()
    tracker.register("app.yaml", "shared.yaml")

    already, previous = tracker.register("other.yaml", "shared.yaml")

    assert already is True
    assert previous == "app.yaml"
    # a origem original é preservada
    assert tracker.origin_of("shared.yaml") == "app.yaml"
    assert len(tracker) == 1


def test_snapshot_is_a_copy():
    tracker = InclusionTracker()
    tracker.register("<root>", "app.yaml")
    snap = tracker.snapshot()
    snap["x.yaml"] = "app.yaml"
    assert "x.yaml" not in tracker
    assert tracker.snapshot() == {"app.yaml": "<root>"}


def test_unknown_path_has_no_origin():
    assert InclusionTracker().origin_of("missing.yaml") is None
