from doppler_sdk.models.activity_log import ActivityLog
from doppler_sdk.models.audit import AuditWorkplace, AuditWorkplaceUser
from doppler_sdk.models.config import Config
from doppler_sdk.models.config_log import ConfigLog, ConfigLogDiff
from doppler_sdk.models.environment import Environment
from doppler_sdk.models.project import Project
from doppler_sdk.models.secret import Secret, SecretValue
from doppler_sdk.models.service_token import ServiceToken
from doppler_sdk.models.share import ShareEncrypted, SharePlain
from doppler_sdk.models.user import User
from doppler_sdk.models.workplace import Workplace

__all__ = [
    "ActivityLog",
    "AuditWorkplace",
    "AuditWorkplaceUser",
    "Config",
    "ConfigLog",
    "ConfigLogDiff",
    "Environment",
    "Project",
    "Secret",
    "SecretValue",
    "ServiceToken",
    "ShareEncrypted",
    "SharePlain",
    "User",
    "Workplace",
]
