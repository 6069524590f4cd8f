"""Tests for the command-line entrypoint."""

import pytest

from macro_tracker import main as main_module


def test_main_serves_http_by_default(monkeypatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("TRANSPORT", "http")
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setattr(
        main_module.uvicorn,
        "run",
        lambda app, host, port: calls.append({"app": app, "host": host, "port": port}),
    )

    main_module.main()

    assert calls[0]["port"] == 8123
    assert calls[0]["host"] == "0.0.0.0"


def test_main_serves_stdio(monkeypatch) -> None:
    served: list[object] = []

    async def fake_run_stdio(tools) -> None:  # type: ignore[no-untyped-def]
        served.append(tools)

    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("TRANSPORT", "stdio")
    monkeypatch.setattr(main_module, "run_stdio", fake_run_stdio)

    main_module.main()

    assert len(served) == 1


def test_main_exits_without_token(monkeypatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
