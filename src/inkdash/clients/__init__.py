"""Fetch client registry."""

from __future__ import annotations

import importlib
from typing import Any

from inkdash.clients.base import BaseDashboardClient
from inkdash.config import ClientType

# Classes are imported on first use so the mock client does not pull in the
# HTTP stack.
CLIENT_CLASSES: dict[ClientType, str] = {
    ClientType.HTTP: "inkdash.clients.http:HttpDashboardClient",
    ClientType.MOCK: "inkdash.clients.mock:MockClient",
}


def _resolve(client_type: ClientType | str) -> type[BaseDashboardClient]:
    try:
        kind = ClientType(client_type)
    except ValueError:
        known = ", ".join(t.value for t in ClientType)
        raise ValueError(f"unknown client type {client_type!r} (expected one of: {known})") from None
    module_path, _, attr = CLIENT_CLASSES[kind].partition(":")
    return getattr(importlib.import_module(module_path), attr)


def create_client(client_type: ClientType | str, **kwargs: Any) -> BaseDashboardClient:
    """Build a client for ``client_type`` ("http", "mock" or the enum).

    Keyword arguments go to the client's constructor unchanged.
    """
    return _resolve(client_type)(**kwargs)


__all__ = ["BaseDashboardClient", "CLIENT_CLASSES", "create_client"]
