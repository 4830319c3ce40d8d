"""
Integration tests for doppler-sdk — tests against the real Doppler API.

Requires environment variables:
  DOPPLER_TOKEN      — personal or service account token with access to the project
  DOPPLER_PROJECT    — existing project to read from
  DOPPLER_CONFIG     — existing config in that project (default: dev)
  DOPPLER_API_HOST   — (optional) defaults to https://api.doppler.com

Run: DOPPLER_INTEGRATION=1 pytest tests/integration/ -v
"""

import os
import uuid

import pytest

from doppler_sdk import APIError, Doppler
from doppler_sdk.models.config import ConfigGetOptions
from doppler_sdk.models.environment import EnvironmentListOptions
from doppler_sdk.models.project import ProjectCreateOptions, ProjectDeleteOptions, ProjectGetOptions
from doppler_sdk.models.secret import SecretDownloadOptions, SecretListOptions

SKIP = not os.environ.get("DOPPLER_INTEGRATION")
PROJECT = os.environ.get("DOPPLER_PROJECT", "")
CONFIG = os.environ.get("DOPPLER_CONFIG", "dev")

pytestmark = pytest.mark.skipif(SKIP, reason="DOPPLER_INTEGRATION not set")


@pytest.fixture(scope="module")
def doppler():
    with Doppler() as client:
        yield client


class TestReadOnly:
    def test_get_project(self, doppler):
        project, envelope = doppler.projects.get(ProjectGetOptions(name=PROJECT))
        assert project.name == PROJECT
        assert envelope.status_code == 200
        assert envelope.request_id

    def test_rate_limit_is_reported(self, doppler):
        _, envelope = doppler.secrets.list(SecretListOptions(project=PROJECT, config=CONFIG))
        assert envelope.rate_limit is not None
        assert envelope.rate_limit.limit > 0

    def test_list_environments(self, doppler):
        environments, _ = doppler.environments.list(EnvironmentListOptions(project=PROJECT))
        assert environments

    def test_get_config(self, doppler):
        config, _ = doppler.configs.get(ConfigGetOptions(project=PROJECT, config=CONFIG))
        assert config.name == CONFIG

    def test_download_env_format(self, doppler):
        text, envelope = doppler.secrets.download(SecretDownloadOptions(project=PROJECT, config=CONFIG, format="env"))
        assert envelope.status_code == 200
        assert "DOPPLER_PROJECT" in text

    def test_unknown_project_raises(self, doppler):
        with pytest.raises(APIError) as exc_info:
            doppler.projects.get(ProjectGetOptions(name=f"missing-{uuid.uuid4().hex[:8]}"))
        assert exc_info.value.response.status_code == 404


class TestProjectLifecycle:
    def test_create_and_delete(self, doppler):
        name = f"sdk-it-{uuid.uuid4().hex[:8]}"
        project, _ = doppler.projects.create(ProjectCreateOptions(name=name, description="integration test"))
        try:
            assert project.name == name
        finally:
            envelope = doppler.projects.delete(ProjectDeleteOptions(name=name))
            assert envelope.status_code < 300
