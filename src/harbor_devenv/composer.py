"""Turns the :py:mod:`~harbor_devenv.components` into Dagger services.

All builders are lazy: they only assemble the container description, nothing
runs in the engine until the caller starts the returned
:py:class:`dagger.Service`.

"""

import dagger

from harbor_devenv.components import get_component
from harbor_devenv.config import DevEnvConfig
from harbor_devenv.descriptor import ServiceDescriptor
from harbor_devenv.image import ImageBuilder
from harbor_devenv.image import PrebuiltImageBuilder
from harbor_devenv.logger import LOGGER


class DevEnvironment:
    """Builds the services of the development environment from the Harbor
    source tree ``source``.

    The Dagger ``client`` defaults to the global client of the current engine
    session. Component images are obtained from ``image_builder``, by
    default the prebuilt images tagged with
    :py:attr:`~harbor_devenv.config.DevEnvConfig.image_tag`.

    """

    def __init__(
        self,
        source: dagger.Directory,
        config: DevEnvConfig | None = None,
        client: dagger.Client | None = None,
        image_builder: ImageBuilder | None = None,
    ) -> None:
        self.source = source
        self.config = config or DevEnvConfig()
        self._client = client or dagger.dag
        self._image_builder = image_builder or PrebuiltImageBuilder(
            self._client, self.config.image_tag
        )

    def base_container(self, desc: ServiceDescriptor) -> dagger.Container:
        if desc.image.pulled:
            return self._client.container(
                platform=dagger.Platform(self.config.platform)
            ).from_(desc.image.address(self.config.harbor_release))
        return self._image_builder.build_image(self.config.platform, desc.image.name)

    def container(self, desc: ServiceDescriptor) -> dagger.Container:
        """Configure the container of ``desc`` without turning it into a
        service.

        """
        debug = self.config.debug
        ctr = self.base_container(desc)

        for mounted_file in desc.files(debug):
            ctr = ctr.with_mounted_file(
                mounted_file.target, self.source.file(mounted_file.source)
            )
        for mounted_dir in desc.mounted_directories:
            ctr = ctr.with_mounted_directory(
                mounted_dir.target, self.source.directory(mounted_dir.source)
            )

        for name, value in desc.env:
            ctr = ctr.with_env_variable(name, value)

        for cmd in desc.setup_execs:
            ctr = ctr.with_exec(list(cmd))

        for port in desc.ports(debug):
            ctr = ctr.with_exposed_port(
                port.port, experimental_skip_healthcheck=port.skip_healthcheck
            )
        for port in desc.withheld_ports:
            ctr = ctr.without_exposed_port(port)

        if self.config.enable_bindings:
            for binding in desc.bindings:
                ctr = ctr.with_service_binding(
                    binding.alias, self.service(binding.component)
                )

        if entrypoint := desc.entrypoint_for(debug):
            ctr = ctr.with_entrypoint(list(entrypoint))

        return ctr

    def service(self, name: str) -> dagger.Service:
        """Build the (not yet started) service of the component ``name``."""
        desc = get_component(name)
        LOGGER.debug(
            "Wiring %s from %s with ports %s",
            desc.pretty_name,
            desc.image.name,
            sorted(desc.port_numbers(self.config.debug)),
        )

        return self.container(desc).as_service(
            use_entrypoint=True,
            insecure_root_capabilities=desc.insecure_root_capabilities,
        )

    def nginx_service(self) -> dagger.Service:
        return self.service("nginx")

    def portal_service(self) -> dagger.Service:
        return self.service("portal")

    def jobservice_service(self) -> dagger.Service:
        return self.service("jobservice")

    def core_service(self) -> dagger.Service:
        return self.service("core")

    def registryctl_service(self) -> dagger.Service:
        return self.service("registryctl")

    def postgres_service(self) -> dagger.Service:
        return self.service("postgresql")

    def redis_service(self) -> dagger.Service:
        return self.service("redis")

    def registry_service(self) -> dagger.Service:
        return self.service("registry")
