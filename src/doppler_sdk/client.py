"""
Doppler — one backend and one API key shared by every resource API.

    from doppler_sdk import Doppler
    from doppler_sdk.models.project import ProjectGetOptions

    with Doppler(key="dp.pt.xxxx") as doppler:
        project, envelope = doppler.projects.get(ProjectGetOptions(name="backend"))
"""

import logging
from typing import Any, Optional

import httpx

from doppler_sdk import settings
from doppler_sdk.activity_logs import ActivityLogsAPI
from doppler_sdk.audit import AuditAPI
from doppler_sdk.auth import AuthAPI
from doppler_sdk.config_logs import ConfigLogsAPI
from doppler_sdk.configs import ConfigsAPI
from doppler_sdk.dynamic_secrets import DynamicSecretsAPI
from doppler_sdk.environments import EnvironmentsAPI
from doppler_sdk.projects import ProjectsAPI
from doppler_sdk.secrets import SecretsAPI
from doppler_sdk.service_tokens import ServiceTokensAPI
from doppler_sdk.share import ShareAPI
from doppler_sdk.transport.http import DEFAULT_TIMEOUT, Backend, BackendConfig
from doppler_sdk.workplace import WorkplaceAPI


class Doppler:
    def __init__(
        self,
        key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self.backend = Backend(BackendConfig(client=self._client, url=base_url, logger=logger))
        self.key = key if key is not None else settings.api_key()

        self.projects = ProjectsAPI(self.backend, self.key)
        self.configs = ConfigsAPI(self.backend, self.key)
        self.config_logs = ConfigLogsAPI(self.backend, self.key)
        self.environments = EnvironmentsAPI(self.backend, self.key)
        self.secrets = SecretsAPI(self.backend, self.key)
        self.service_tokens = ServiceTokensAPI(self.backend, self.key)
        self.dynamic_secrets = DynamicSecretsAPI(self.backend, self.key)
        self.share = ShareAPI(self.backend, self.key)
        self.workplace = WorkplaceAPI(self.backend, self.key)
        self.audit = AuditAPI(self.backend, self.key)
        self.activity_logs = ActivityLogsAPI(self.backend, self.key)
        self.auth = AuthAPI(self.backend, self.key)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Doppler":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
