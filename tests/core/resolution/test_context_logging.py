# tests/core/resolution/test_context_logging.py
"""
Testes de logging estruturado e coleta de erros no ResolutionContext.
"""

from gaeenv.core.errors import ErrorPayload


def test_structured_log_event(dummy_ctx):
    dummy_ctx.log(file="app.yaml", level="INFO", message="hello", foo=1)

    assert len(dummy_ctx.events) == 1
    ev = dummy_ctx.events[0]
    assert ev["run_id"] == dummy_ctx.run_id
    assert ev["file"] == "app.yaml"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_error_collection_preserves_order(dummy_ctx):
    first = ErrorPayload(type="A", message="a", details={})
    second = ErrorPayload(type="B", message="b", details={})
    dummy_ctx.record_error(first)
    dummy_ctx.record_error(second)
    assert dummy_ctx.errors == [first, second]


def test_contexts_are_isolated():
    from gaeenv.core.resolution.context import ResolutionContext

    a = ResolutionContext()
    b = ResolutionContext()
    a.store.put("A", "1")
    a.tracker.register("<root>", "app.yaml")
    assert a.run_id != b.run_id
    assert len(b.store) == 0
    assert "app.yaml" not in b.tracker
