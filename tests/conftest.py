"""Fixtures: a DeezerClient wired to an in-memory transport."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from deezer_metadata.client import DeezerClient
from deezer_metadata.config import ClientSettings

Routes = dict[str, Any]


def mock_transport(routes: Routes, seen: list[httpx.Request]) -> httpx.MockTransport:
    """Serve ``routes`` keyed by URL path.

    A route value is either a JSON payload (served with status 200) or a
    callable taking the request and returning an ``httpx.Response``.
    Unknown paths get Deezer's in-band "no data" error.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(
                200,
                json={"error": {"type": "DataException", "message": "no data", "code": 800}},
            )
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client() -> Iterator[Callable[..., tuple[DeezerClient, list[httpx.Request]]]]:
    """Factory building a DeezerClient over in-memory routes.

    Returns the client and the list of requests it sent.
    """
    clients: list[DeezerClient] = []

    def factory(
        routes: Routes,
        *,
        settings: ClientSettings | None = None,
    ) -> tuple[DeezerClient, list[httpx.Request]]:
        seen: list[httpx.Request] = []
        client = DeezerClient(
            settings=settings or ClientSettings(),
            transport=mock_transport(routes, seen),
        )
        clients.append(client)
        return client, seen

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def patch_default_client(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Any, Routes], list[httpx.Request]]:
    """Replace ``module.DeezerClient`` with one that serves in-memory routes."""

    def apply(module: Any, routes: Routes) -> list[httpx.Request]:
        seen: list[httpx.Request] = []
        transport = mock_transport(routes, seen)

        class MockedDeezerClient(DeezerClient):
            def __init__(self, *, settings: ClientSettings | None = None, **_: Any) -> None:
                super().__init__(settings=settings or ClientSettings(), transport=transport)

        monkeypatch.setattr(module, "DeezerClient", MockedDeezerClient)
        return seen

    return apply
