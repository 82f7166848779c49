import pytest
from pytest_httpx import HTTPXMock

from azdevops._config import Config
from azdevops._services import RepositoriesService
from azdevops._services._base_service import basic_auth_value
from azdevops.models import Repository, RequestFailure


@pytest.fixture
def service(config: Config) -> RepositoriesService:
    return RepositoriesService(config=config)


class TestRepositoriesService:
    class TestGet:
        def test_get_repository(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
            secret: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/git/repositories/repo1?api-version=7.0",
                status_code=200,
                json={
                    "id": "5febef5a-833d-4e14-b9c0-14cb638f91e6",
                    "name": "repo1",
                    "isFork": False,
                    "defaultBranch": "refs/heads/main",
                    "project": {"id": "p-1", "name": "web", "state": "wellFormed"},
                },
            )

            repository = service.get("repo1")

            assert isinstance(repository, Repository)
            assert repository.name == "repo1"
            assert repository.is_fork is False
            assert repository.default_branch == "refs/heads/main"
            assert repository.project is not None
            assert repository.project.name == "web"

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.headers["Authorization"] == basic_auth_value(secret)
            assert sent_request.headers["Accept"] == "application/json"

        def test_get_missing_repository(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
        ) -> None:
            url = f"{base_url}/git/repositories/missing?api-version=7.0"
            httpx_mock.add_response(
                url=url,
                status_code=404,
                json={"message": "TF401019: The Git repository does not exist."},
            )

            with pytest.raises(RequestFailure) as exc_info:
                service.get("missing")

            assert exc_info.value.status_code == 404
            assert "TF401019" in str(exc_info.value)

        @pytest.mark.anyio
        async def test_get_repository_async(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/git/repositories/repo1?api-version=7.0",
                json={"name": "repo1", "isFork": True},
            )

            repository = await service.get_async("repo1")

            assert repository.name == "repo1"
            assert repository.is_fork is True
            assert repository.default_branch is None

    class TestGetFile:
        def test_get_text_file(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=(
                    f"{base_url}/sourceProviders/tfsgit/filecontents"
                    "?repository=repo1&commitOrBranch=main&path=README.md&api-version=7.0"
                ),
                text="# repo1\n",
            )

            content = service.get_file("repo1", "main", "README.md")

            assert content == "# repo1\n"
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Accept"] == "text/plain"

        def test_get_json_file(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=(
                    f"{base_url}/sourceProviders/tfsgit/filecontents"
                    "?repository=repo1&commitOrBranch=abc123&path=package.json&api-version=7.0"
                ),
                json={"name": "web-app", "version": "1.2.0"},
            )

            content = service.get_file("repo1", "abc123", "package.json", json=True)

            assert content == {"name": "web-app", "version": "1.2.0"}
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Accept"] == "application/json"

        @pytest.mark.anyio
        async def test_get_file_async(
            self,
            httpx_mock: HTTPXMock,
            service: RepositoriesService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=(
                    f"{base_url}/sourceProviders/tfsgit/filecontents"
                    "?repository=repo1&commitOrBranch=main&path=.labels&api-version=7.0"
                ),
                text="bug\nfeature\n",
            )

            content = await service.get_file_async("repo1", "main", ".labels")

            assert content.splitlines() == ["bug", "feature"]
