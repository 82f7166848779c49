import certifi
import pytest

from azdevops._utils import (
    Endpoint,
    get_httpx_client_kwargs,
    path_segment,
    sanitize_headers,
    user_agent_value,
)
from azdevops._utils._ssl_context import ca_locations, expand_path


class TestEndpoint:
    def test_normalizes_slashes(self) -> None:
        assert Endpoint("git/repositories/") == "/git/repositories"
        assert Endpoint("/git/repositories") == "/git/repositories"

    def test_absolute(self) -> None:
        endpoint = Endpoint("/git/repositories/repo1")

        assert (
            endpoint.absolute("https://dev.azure.com/contoso/web/_apis/")
            == "https://dev.azure.com/contoso/web/_apis/git/repositories/repo1"
        )


class TestSanitizeHeaders:
    def test_masks_authorization_keeping_scheme(self) -> None:
        headers = {"Authorization": "Basic OnNlY3JldA==", "Accept": "text/plain"}

        assert sanitize_headers(headers) == {
            "Authorization": "Basic ***",
            "Accept": "text/plain",
        }

    def test_masks_schemeless_values(self) -> None:
        assert sanitize_headers({"Cookie": "session=abc"}) == {"Cookie": "***"}

    def test_does_not_mutate_input(self) -> None:
        headers = {"authorization": "Bearer token"}

        sanitize_headers(headers)

        assert headers == {"authorization": "Bearer token"}


class TestUserAgent:
    def test_user_agent_with_component(self) -> None:
        value = user_agent_value("PullRequestsService")

        assert value.startswith("azdevops-python/")
        assert value.endswith("(PullRequestsService)")


class TestPathSegment:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("bug", "bug"),
            ("needs#review", "needs%23review"),
            ("area/ui", "area%2Fui"),
            ("good first issue", "good%20first%20issue"),
            (42, "42"),
        ],
    )
    def test_encodes_reserved_characters(self, value, expected) -> None:
        assert path_segment(value) == expected


class TestSslContext:
    def test_expand_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERTS", "/etc/certs")

        assert expand_path("$CERTS/ca.pem") == "/etc/certs/ca.pem"
        assert expand_path("") is None
        assert expand_path(None) is None

    def test_ca_locations_default_to_certifi(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        for name in ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE", "SSL_CERT_DIR"):
            monkeypatch.delenv(name, raising=False)

        assert ca_locations() == (certifi.where(), None)

    def test_ssl_cert_file_wins_over_requests_bundle(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SSL_CERT_FILE", "/etc/ssl/corp.pem")
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/ssl/other.pem")
        monkeypatch.setenv("SSL_CERT_DIR", "/etc/ssl/certs")

        assert ca_locations() == ("/etc/ssl/corp.pem", "/etc/ssl/certs")

    def test_client_kwargs_only_set_timeout_when_given(self) -> None:
        kwargs = get_httpx_client_kwargs()

        assert kwargs["follow_redirects"] is True
        assert "timeout" not in kwargs
        assert get_httpx_client_kwargs(timeout=5.0)["timeout"] == 5.0
