"""Tests for the deployment entrypoints."""

import importlib

from fastapi import FastAPI

from tests.conftest import TEST_SUPABASE_KEY


def test_serverless_entrypoint_exposes_app(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", TEST_SUPABASE_KEY)

    module = importlib.import_module("api.index")

    assert isinstance(module.app, FastAPI)
    paths = {route.path for route in module.app.routes}
    assert {"/api/photos", "/api/feedbacks/{feedback_id}", "/admin/ui"} <= paths
