from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("azdevops")
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value(specific_component: str = "") -> str:
    base = f"azdevops-python/{_package_version()}"
    return f"{base} ({specific_component})" if specific_component else base
