from __future__ import annotations

from advisor_crm.app.request_context import RequestContext


def test_headers_without_token_have_no_authorization() -> None:
    context = RequestContext(base_url="https://crm.example/api/")

    assert context.headers() == {"Content-Type": "application/json"}
    assert not context.is_authenticated
    assert context.url("tasks") == "https://crm.example/api/tasks"


def test_set_token_adds_bearer_header_and_can_be_cleared() -> None:
    context = RequestContext()
    context.set_token("  abc123 ")

    assert context.headers()["Authorization"] == "Bearer abc123"

    context.set_token("")
    assert context.token is None
    assert "Authorization" not in context.headers()


def test_instances_do_not_share_tokens() -> None:
    first = RequestContext(token="one")
    second = RequestContext()

    second.set_token("two")

    assert first.headers()["Authorization"] == "Bearer one"
    assert second.headers()["Authorization"] == "Bearer two"


def test_headers_are_fresh_and_token_wins_over_extra() -> None:
    context = RequestContext(token="tok")
    headers = context.headers({"Authorization": "spoof", "X-Trace": "1"})
    headers["Mutated"] = "yes"

    assert headers["Authorization"] == "Bearer tok"
    assert headers["X-Trace"] == "1"
    assert "Mutated" not in context.headers()
