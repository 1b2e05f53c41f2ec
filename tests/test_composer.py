from collections.abc import Callable
from unittest.mock import MagicMock
from unittest.mock import call

import pytest

from harbor_devenv.components import SORTED_COMPONENT_NAMES
from harbor_devenv.composer import DevEnvironment
from harbor_devenv.config import DevEnvConfig

MakeEnv = Callable[..., DevEnvironment]


def test_builders_delegate_to_service(make_env: MakeEnv):
    env = make_env()
    for builder, name in (
        (env.nginx_service, "nginx"),
        (env.portal_service, "portal"),
        (env.jobservice_service, "jobservice"),
        (env.core_service, "core"),
        (env.registryctl_service, "registryctl"),
        (env.postgres_service, "postgresql"),
        (env.redis_service, "redis"),
        (env.registry_service, "registry"),
    ):
        env.service = MagicMock(name="service")
        builder()
        env.service.assert_called_once_with(name)


def test_unknown_component(make_env: MakeEnv, client: MagicMock):
    with pytest.raises(ValueError, match="Unknown component"):
        make_env().service("harbor")
    client.container.assert_not_called()


@pytest.mark.parametrize("name", SORTED_COMPONENT_NAMES)
def test_service_is_not_started(
    make_env: MakeEnv, container: MagicMock, name: str
):
    svc = make_env().service(name)

    assert svc is container.as_service.return_value
    for method in ("start", "up", "stop", "endpoint"):
        getattr(svc, method).assert_not_called()


def test_nginx(make_env: MakeEnv, client: MagicMock, container: MagicMock):
    make_env().nginx_service()

    client.container.assert_called_once_with(platform="linux/amd64")
    container.from_.assert_called_once_with("goharbor/nginx-photon:dev")
    container.with_mounted_file.assert_called_once_with(
        "/etc/nginx/nginx.conf", "file:.dagger/config/proxy/nginx.conf"
    )
    assert container.with_exposed_port.call_args_list == [
        call(8080, experimental_skip_healthcheck=False),
        call(4001, experimental_skip_healthcheck=False),
    ]
    container.without_exposed_port.assert_called_once_with(8443)
    container.with_entrypoint.assert_not_called()
    container.as_service.assert_called_once_with(
        use_entrypoint=True, insecure_root_capabilities=False
    )


def test_nginx_without_debugging(make_env: MakeEnv, container: MagicMock):
    make_env(debug=False).nginx_service()

    container.with_exposed_port.assert_called_once_with(
        8080, experimental_skip_healthcheck=False
    )


def test_jobservice(make_env: MakeEnv, container: MagicMock):
    make_env().jobservice_service()

    container.from_.assert_called_once_with("goharbor/harbor-jobservice:dev")
    assert container.with_mounted_file.call_args_list == [
        call(
            "/etc/jobservice/config.yml",
            "file:.dagger/config/jobservice/config.yml",
        ),
        call("/envFile", "file:.dagger/config/jobservice/env"),
        call("/run_script", "file:.dagger/config/run_env.sh"),
    ]
    container.with_mounted_directory.assert_called_once_with(
        "/var/log/jobs", "dir:.dagger/config/jobservice"
    )
    container.with_exec.assert_called_once_with(["chmod", "+x", "/run_script"])
    container.with_exposed_port.assert_called_once_with(
        8080, experimental_skip_healthcheck=False
    )
    container.without_exposed_port.assert_not_called()
    container.with_entrypoint.assert_called_once_with(
        ["/run_script", "/jobservice -c /etc/jobservice/config.yml"]
    )


def test_core(make_env: MakeEnv, container: MagicMock):
    make_env().core_service()

    container.from_.assert_called_once_with("goharbor/harbor-core:dev")
    assert container.with_mounted_file.call_args_list == [
        call("/etc/core/app.conf", "file:.dagger/config/core/app.conf"),
        call("/envFile", "file:.dagger/config/core/env"),
        call("/run_script", "file:.dagger/config/run_debug.sh"),
    ]
    assert container.with_exposed_port.call_args_list == [
        call(8080, experimental_skip_healthcheck=True),
        call(4001, experimental_skip_healthcheck=True),
    ]
    container.with_service_binding.assert_not_called()
    container.with_entrypoint.assert_called_once_with(
        ["/run_script", "/core", "4001"]
    )
    container.as_service.assert_called_once_with(
        use_entrypoint=True, insecure_root_capabilities=True
    )


def test_core_without_debugging(make_env: MakeEnv, container: MagicMock):
    make_env(debug=False).core_service()

    assert call("/run_script", "file:.dagger/config/run_env.sh") in (
        container.with_mounted_file.call_args_list
    )
    container.with_exposed_port.assert_called_once_with(
        8080, experimental_skip_healthcheck=True
    )
    container.with_entrypoint.assert_called_once_with(["/run_script", "/core"])


def test_core_with_bindings(make_env: MakeEnv, container: MagicMock):
    make_env(enable_bindings=True).core_service()

    assert [
        c.args[0] for c in container.with_service_binding.call_args_list
    ] == ["redis", "postgresql", "registry", "registryctl"]
    for c in container.with_service_binding.call_args_list:
        assert c.args[1] is container.as_service.return_value
    # core and its four dependencies
    assert container.as_service.call_count == 5


def test_registryctl(make_env: MakeEnv, container: MagicMock):
    make_env().registryctl_service()

    container.from_.assert_called_once_with("goharbor/harbor-registryctl:dev")
    container.with_mounted_directory.assert_called_once_with(
        "/etc/registry", "dir:.dagger/config/registry"
    )
    container.with_exposed_port.assert_not_called()
    container.with_exec.assert_not_called()
    container.with_entrypoint.assert_called_once_with(
        ["/run_script", "/registryctl -c /etc/registryctl/config.yml"]
    )


def test_registry(make_env: MakeEnv, container: MagicMock):
    make_env().registry_service()

    container.from_.assert_called_once_with("goharbor/registry-photon:dev")
    container.with_mounted_directory.assert_called_once_with(
        "/etc/registry", "dir:.dagger/config/registry"
    )
    container.with_exposed_port.assert_called_once_with(
        5000, experimental_skip_healthcheck=False
    )
    assert container.without_exposed_port.call_args_list == [call(5001), call(5443)]


def test_postgres(make_env: MakeEnv, client: MagicMock, container: MagicMock):
    make_env().postgres_service()

    client.container.assert_called_once_with(platform="linux/amd64")
    container.from_.assert_called_once_with("goharbor/harbor-db:v2.12.2")
    container.with_env_variable.assert_called_once_with(
        "POSTGRES_PASSWORD", "root123"
    )
    container.with_exposed_port.assert_called_once_with(
        5432, experimental_skip_healthcheck=False
    )
    container.with_mounted_file.assert_not_called()
    container.without_exposed_port.assert_not_called()


def test_redis_follows_release(make_env: MakeEnv, container: MagicMock):
    make_env(harbor_release="v2.13.0").redis_service()

    container.from_.assert_called_once_with("goharbor/redis-photon:v2.13.0")
    container.with_exposed_port.assert_called_once_with(
        6379, experimental_skip_healthcheck=False
    )


def test_custom_image_builder(
    source: MagicMock, client: MagicMock, container: MagicMock
):
    builder = MagicMock(name="image_builder")
    builder.build_image.return_value = container

    env = DevEnvironment(
        source,
        config=DevEnvConfig(platform="linux/arm64"),
        client=client,
        image_builder=builder,
    )
    env.registry_service()
    env.redis_service()

    builder.build_image.assert_called_once_with("linux/arm64", "registry")
    # pulled images never go through the image builder
    client.container.assert_called_once_with(platform="linux/arm64")


def test_image_builder_errors_propagate(source: MagicMock, client: MagicMock):
    builder = MagicMock(name="image_builder")
    builder.build_image.side_effect = RuntimeError("build failed")

    env = DevEnvironment(source, client=client, image_builder=builder)
    with pytest.raises(RuntimeError, match="build failed"):
        env.core_service()


def test_source_errors_propagate(make_env: MakeEnv, source: MagicMock):
    source.file.side_effect = FileNotFoundError(".dagger/config/core/app.conf")

    with pytest.raises(FileNotFoundError):
        make_env().core_service()
