"""Provider descriptor — what fastlocal registers with the orchestration host."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as dist_version
from typing import Any

from fastlocal.datasource import FileDataSource

PROVIDER_TYPE_NAME = "fastlocal"


def installed_version() -> str:
    try:
        return dist_version("fastlocal")
    except PackageNotFoundError:
        return "dev"


class FastLocalProvider:
    """Exposes the ``file`` data source. No resources, functions or provider config."""

    type_name = PROVIDER_TYPE_NAME

    def __init__(self, version: str | None = None):
        self.version = version or installed_version()

    def schema(self) -> dict[str, Any]:
        return {}

    def data_sources(self) -> list[FileDataSource]:
        return [FileDataSource()]

    def resources(self) -> list[Any]:
        return []

    def functions(self) -> list[Any]:
        return []

    def get_data_source(self, type_name: str) -> FileDataSource:
        sources = {ds.type_name(self.type_name): ds for ds in self.data_sources()}
        if type_name not in sources:
            raise KeyError(f"Unknown data source: {type_name!r}. Available: {list(sources)}")
        return sources[type_name]
