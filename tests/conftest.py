import pytest

from azdevops._config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "AZURE_DEVOPS_EXT_PAT",
        "SYSTEM_ACCESSTOKEN",
        "SYSTEM_COLLECTIONURI",
        "AZURE_DEVOPS_ORG",
        "SYSTEM_TEAMPROJECT",
        "AZURE_DEVOPS_RETRY_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def organization() -> str:
    return "contoso"


@pytest.fixture
def project() -> str:
    return "web"


@pytest.fixture
def base_url(organization: str, project: str) -> str:
    return f"https://dev.azure.com/{organization}/{project}/_apis"


@pytest.fixture
def secret() -> str:
    return "secret_pat"


@pytest.fixture
def config(base_url: str, secret: str) -> Config:
    return Config(base_url=base_url, secret=secret)
