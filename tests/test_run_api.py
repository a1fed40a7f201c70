"""Tests for the API launcher: importing it must not start a server."""

import run_api
from clustering.settings import DEFAULT_K_NOT_SHARED, DEFAULT_K_SHARED


class TestRunApi:
    def test_import_does_not_start_server(self):
        assert run_api.__name__ == "run_api"
        assert hasattr(run_api, "uvicorn")

    def test_docstring_names_settings(self):
        for var in ("PORT", "RELOAD", "CLUSTER_K_SHARED", "CLUSTER_K_NOT_SHARED", "CLUSTER_IGNORE"):
            assert var in run_api.__doc__

    def test_documented_defaults_match_settings(self):
        assert f"({DEFAULT_K_SHARED} / {DEFAULT_K_NOT_SHARED})" in run_api.__doc__
