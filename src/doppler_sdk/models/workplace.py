"""
Workplace models — /v3/workplace.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse


class Workplace(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    billing_email: Optional[str] = None     # Where Doppler sends invoices


@dataclass(kw_only=True)
class WorkplaceUpdateOptions:
    new_name: Optional[str] = param(body="name", omitempty=True, default=None)
    new_billing_email: Optional[str] = param(body="billing_email", omitempty=True, default=None)


class WorkplaceGetResponse(APIResponse):
    workplace: Optional[Workplace] = None


class WorkplaceUpdateResponse(APIResponse):
    workplace: Optional[Workplace] = None
