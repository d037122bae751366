from importlib.metadata import PackageNotFoundError, version

_DISTRIBUTION = "logger-factory"


def get_package_version() -> str:
    try:
        return version(_DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0+unknown"


__all__ = ["get_package_version"]
