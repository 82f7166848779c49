import pytest
from pytest_httpx import HTTPXMock

from azdevops._config import Config
from azdevops._services import ApiClient


@pytest.fixture
def service(config: Config) -> ApiClient:
    return ApiClient(config=config)


class TestApiClient:
    def test_fetch_relative_endpoint(
        self, httpx_mock: HTTPXMock, service: ApiClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/git/repositories?api-version=7.0",
            json={"count": 1, "value": [{"name": "repo1"}]},
        )

        result = service.fetch("git/repositories")

        assert result["value"][0]["name"] == "repo1"

    def test_fetch_absolute_url_keeps_params(
        self, httpx_mock: HTTPXMock, service: ApiClient
    ) -> None:
        url = "https://vssps.dev.azure.com/contoso/_apis/profile/profiles/me"
        httpx_mock.add_response(
            url=f"{url}?api-version=7.1", json={"displayName": "Build Agent"}
        )

        result = service.fetch(url, params={"api-version": "7.1"})

        assert result == {"displayName": "Build Agent"}

    def test_fetch_overrides_api_version(
        self, httpx_mock: HTTPXMock, service: ApiClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/git/pullrequests?api-version=7.1-preview.1&searchCriteria.status=active",
            json={"value": []},
        )

        result = service.fetch(
            "/git/pullrequests",
            params={"api-version": "7.1-preview.1", "searchCriteria.status": "active"},
        )

        assert result == {"value": []}

    @pytest.mark.anyio
    async def test_fetch_async_text(
        self, httpx_mock: HTTPXMock, service: ApiClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/git/repositories/repo1/items?path=README.md&api-version=7.0",
            method="GET",
            text="# repo1",
        )

        result = await service.fetch_async(
            "/git/repositories/repo1/items", params={"path": "README.md"}, json=False
        )

        assert result == "# repo1"
