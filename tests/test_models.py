"""
Unit tests for core.domain (models, results, errors).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.errors import BlockstackError, SerializationError, TransportError
from core.domain.models import Credentials, Endpoints
from core.domain.results import RegistryResult


class TestCredentials:
    def test_is_immutable(self) -> None:
        creds = Credentials(app_id="id", app_secret="secret")

        with pytest.raises(ValidationError):
            creds.app_id = "other"  # type: ignore[misc]

    def test_secret_is_masked_in_repr(self) -> None:
        creds = Credentials(app_id="id", app_secret="top-secret")

        assert "top-secret" not in repr(creds)
        assert creds.secret_value == "top-secret"

    @pytest.mark.parametrize(
        ("creds", "complete"),
        [
            (Credentials(app_id="id", app_secret="s"), True),
            (Credentials(app_id="id"), False),
            (Credentials(app_id="", app_secret="s"), False),
        ],
    )
    def test_is_complete(self, creds: Credentials, complete: bool) -> None:
        assert creds.is_complete is complete


class TestEndpoints:
    def test_defaults_point_to_onename_v1(self) -> None:
        endpoints = Endpoints()

        assert endpoints.users == "https://api.onename.com/v1/users"
        assert endpoints.search == "https://api.onename.com/v1/search?query="
        assert endpoints.transactions == "https://api.onename.com/v1/transactions"
        assert endpoints.addresses == "https://api.onename.com/v1/addresses"
        assert endpoints.domains == "https://api.onename.com/v1/domains"

    def test_from_base_url_strips_trailing_slash(self) -> None:
        endpoints = Endpoints.from_base_url("http://localhost:5000/v1/")

        assert endpoints.users == "http://localhost:5000/v1/users"
        assert endpoints.domains == "http://localhost:5000/v1/domains"

    def test_default_base_url_matches_defaults(self) -> None:
        assert Endpoints.from_base_url("https://api.onename.com/v1") == Endpoints()


class TestRegistryResult:
    def test_json_decodes_payload(self) -> None:
        result = RegistryResult(payload=b'{"usernames": ["muneeb"]}', status_code=200)

        assert result.ok
        assert result.json() == {"usernames": ["muneeb"]}

    def test_json_reraises_error(self) -> None:
        error = TransportError("down")
        result = RegistryResult(error=error)

        assert not result.ok
        with pytest.raises(TransportError):
            result.json()

    def test_errors_share_a_base_class(self) -> None:
        assert issubclass(SerializationError, BlockstackError)
        assert issubclass(TransportError, ConnectionError)
