"""Option record encoding: query parameters and JSON bodies."""

import dataclasses
import enum
import json
from dataclasses import dataclass
from typing import Optional

import pytest

from doppler_sdk.errors import EncodingError
from doppler_sdk.models.audit import AuditWorkplaceGetOptions
from doppler_sdk.models.auth import AuthRevokeOptions, AuthToken
from doppler_sdk.models.environment import EnvironmentCreateOptions, EnvironmentRenameOptions
from doppler_sdk.models.project import ProjectListOptions, ProjectUpdateOptions
from doppler_sdk.models.secret import SecretListOptions, SecretUpdateOptions
from doppler_sdk.models.service_token import ServiceTokenListOptions
from doppler_sdk.models.share import ShareEncryptedOptions, SharePlainOptions
from doppler_sdk.models.workplace import WorkplaceUpdateOptions
from doppler_sdk.options import ListOptions, encode_body, format_scalar, is_zero, param, query_params


class Color(enum.Enum):
    RED = "red"


@dataclass(kw_only=True)
class Filters:
    tag: str = param(query="tag")
    hidden: str = param(body="hidden", default="x")


@dataclass(kw_only=True)
class Search:
    filters: Optional[Filters] = param(inline=True, default=None)
    names: list[str] = param(query="name", default_factory=list)
    color: Optional[Color] = param(query="color", body="color", default=None)
    note: Optional[str] = param(query="note", default=None)
    both: str = param(query="both", body="both", default="")


@dataclass(kw_only=True)
class Unserialisable:
    thing: object = param(body="thing")


class TestQueryParams:
    def test_routes_query_fields_only(self):
        params = query_params(SecretListOptions(project="backend", config="dev", include_dynamic=True))
        assert params == {
            "project": ["backend"],
            "config": ["dev"],
            "include_dynamic_secrets": ["true"],
        }

    def test_optional_fields_keep_explicit_zero_values(self):
        params = query_params(SecretListOptions(project="p", config="c", include_dynamic=False, dynamic_ttl_seconds=0))
        assert params == {
            "project": ["p"],
            "config": ["c"],
            "include_dynamic_secrets": ["false"],
            "dynamic_secrets_ttl_sec": ["0"],
        }
        assert query_params(AuditWorkplaceGetOptions(settings=False)) == {"settings": ["false"]}

    def test_unset_optional_fields_are_dropped(self):
        assert query_params(SecretListOptions(project="p", config="c")) == {"project": ["p"], "config": ["c"]}
        assert query_params(AuditWorkplaceGetOptions()) == {}

    def test_non_optional_zero_values_are_dropped(self):
        assert query_params(ProjectListOptions(page=0, per_page=0)) == {}
        assert query_params(ServiceTokenListOptions(project="", config="c")) == {"config": ["c"]}

    def test_inherited_list_options(self):
        assert query_params(ProjectListOptions(page=2, per_page=50)) == {"page": ["2"], "per_page": ["50"]}
        assert query_params(ProjectListOptions()) == {}
        assert query_params(ListOptions(page=3)) == {"page": ["3"]}

    def test_body_fields_never_reach_the_query(self):
        params = query_params(ProjectUpdateOptions(name="old", new_name="new"))
        assert params == {}

    def test_inline_records_sequences_and_none(self):
        params = query_params(Search(filters=Filters(tag="a"), names=["x", "y"], color=Color.RED))
        assert params == {"tag": ["a"], "name": ["x", "y"], "color": ["red"], "both": [""]}
        assert "note" not in params

    def test_non_records_have_no_query(self):
        assert query_params(None) == {}
        assert query_params({"project": "p"}) == {}


class TestEncodeBody:
    def test_body_uses_body_names(self):
        body = json.loads(encode_body(ProjectUpdateOptions(name="old", new_name="new")))
        assert body == {"project": "old", "name": "new"}

    def test_query_fields_stay_out_of_the_body(self):
        body = json.loads(encode_body(EnvironmentCreateOptions(project="p", name="Staging", slug="stg")))
        assert body == {"name": "Staging", "slug": "stg"}

    def test_omitempty_drops_none_body_fields(self):
        body = json.loads(encode_body(EnvironmentRenameOptions(project="p", slug="stg", new_name="Stage")))
        assert body == {"name": "Stage"}

    def test_optional_body_fields_keep_explicit_zero_values(self):
        assert json.loads(encode_body(SharePlainOptions(secret="s", expire_views=0))) == {"secret": "s", "expire_views": 0}
        body = json.loads(encode_body(WorkplaceUpdateOptions(new_name="", new_billing_email="billing@acme.io")))
        assert body == {"name": "", "billing_email": "billing@acme.io"}

    def test_field_on_both_surfaces(self):
        payload = Search(both="yes", color=Color.RED)
        assert query_params(payload)["both"] == ["yes"]
        assert json.loads(encode_body(payload)) == {"color": "red", "both": "yes"}

    def test_nested_maps(self):
        body = json.loads(encode_body(SecretUpdateOptions(project="p", config="c", new_secrets={"A": "1", "B": ""})))
        assert body == {"project": "p", "config": "c", "secrets": {"A": "1", "B": ""}}

    def test_auth_revoke_is_a_bare_array(self):
        payload = AuthRevokeOptions(tokens=[AuthToken(token="token1"), AuthToken(token="token2")])
        assert encode_body(payload) == b'[{"token":"token1"},{"token":"token2"}]'

    def test_none_and_plain_values(self):
        assert encode_body(None) == b""
        assert encode_body({"a": 1}) == b'{"a":1}'
        assert encode_body([1, 2]) == b"[1,2]"

    def test_unserialisable_value_raises_encoding_error(self):
        with pytest.raises(EncodingError) as exc_info:
            encode_body(Unserialisable(thing=object()))
        assert exc_info.value.code == "encoding_error"


def test_format_scalar():
    assert format_scalar(True) == "true"
    assert format_scalar(False) == "false"
    assert format_scalar(42) == "42"
    assert format_scalar(Color.RED) == "red"
    assert format_scalar("verbatim value") == "verbatim value"


def test_is_zero():
    assert is_zero(None)
    assert is_zero("")
    assert is_zero(0)
    assert is_zero(False)
    assert is_zero([])
    assert not is_zero("x")
    assert not is_zero(1)
    assert not is_zero(True)


def rebuild_from_body(option_type, body: dict):
    """Construct option_type from a decoded JSON body, keyed by each field's body name."""
    kwargs = {}
    for f in dataclasses.fields(option_type):
        name = f.metadata.get("body", "-")
        if name != "-" and name in body:
            kwargs[f.name] = body[name]
    return option_type(**kwargs)


class TestBodyRoundTrip:
    @pytest.mark.parametrize("options", [
        ShareEncryptedOptions(secret="c2VjcmV0", password="hash", expire_views=0, expire_days=7),
        SharePlainOptions(secret="hunter2", expire_views=1),
        ProjectUpdateOptions(name="backend", new_name="api", new_description="REST API"),
        SecretUpdateOptions(project="p", config="c", new_secrets={"A": "1", "B": ""}),
        WorkplaceUpdateOptions(new_billing_email="billing@acme.io"),
    ])
    def test_body_decodes_to_the_same_options(self, options):
        body = json.loads(encode_body(options))
        assert rebuild_from_body(type(options), body) == options

    def test_revoke_array_decodes_to_the_same_tokens_in_order(self):
        options = AuthRevokeOptions(tokens=[AuthToken(token=t) for t in ("b", "a", "c")])
        body = json.loads(encode_body(options))
        assert [item["token"] for item in body] == ["b", "a", "c"]
        assert AuthRevokeOptions(tokens=[AuthToken(**item) for item in body]) == options
