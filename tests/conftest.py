from collections.abc import Callable
from typing import Generator
from unittest.mock import MagicMock

import pytest

from harbor_devenv.composer import DevEnvironment
from harbor_devenv.config import DevEnvConfig

#: methods of :py:class:`dagger.Container` that return a new container
CONTAINER_BUILDER_METHODS = (
    "from_",
    "with_mounted_file",
    "with_mounted_directory",
    "with_env_variable",
    "with_exec",
    "with_exposed_port",
    "without_exposed_port",
    "with_service_binding",
    "with_entrypoint",
)


@pytest.fixture
def container() -> MagicMock:
    """A fake container that records all calls and returns itself from every
    builder method.

    """
    ctr = MagicMock(name="container")
    for method in CONTAINER_BUILDER_METHODS:
        getattr(ctr, method).return_value = ctr
    return ctr


@pytest.fixture
def client(container: MagicMock) -> MagicMock:
    cl = MagicMock(name="client")
    cl.container.return_value = container
    return cl


@pytest.fixture
def source() -> MagicMock:
    src = MagicMock(name="source")
    src.file.side_effect = lambda path: f"file:{path}"
    src.directory.side_effect = lambda path: f"dir:{path}"
    return src


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in (
        "HARBOR_DEV_PLATFORM",
        "HARBOR_DEV_DEBUG",
        "HARBOR_DEV_IMAGE_TAG",
        "HARBOR_DEV_RELEASE",
        "HARBOR_DEV_BINDINGS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def make_env(source: MagicMock, client: MagicMock) -> Callable[..., DevEnvironment]:
    """Factory for a :py:class:`DevEnvironment` on the fake source tree and
    client, the keyword arguments are passed to :py:class:`DevEnvConfig`.

    """

    def _make_env(**config_kwargs) -> DevEnvironment:
        return DevEnvironment(
            source, config=DevEnvConfig(**config_kwargs), client=client
        )

    return _make_env
