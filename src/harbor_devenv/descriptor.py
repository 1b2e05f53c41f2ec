"""Declarative description of a single service of the development
environment.

A :py:class:`ServiceDescriptor` only holds data: the image, the files and
directories to mount, the ports and the entrypoint. It is turned into a Dagger
service by :py:class:`~harbor_devenv.composer.DevEnvironment`.

"""

from dataclasses import dataclass
from pathlib import PurePosixPath


def _check_target(target: str) -> None:
    if not PurePosixPath(target).is_absolute():
        raise ValueError(f"Mount target must be an absolute path, got '{target}'")


def _in_mode(only_in_debug: bool | None, debug: bool) -> bool:
    return only_in_debug is None or only_in_debug == debug


@dataclass(frozen=True)
class ImageRef:
    """Reference to the base image of a service."""

    #: For built images the name of the component that the image builder is
    #: asked for, for pulled images the repository on the registry.
    name: str

    #: Pulled images are fetched from the registry as
    #: ``$name:$harbor_release``, all others are requested from the image
    #: builder.
    pulled: bool = False

    @staticmethod
    def built(component: str) -> "ImageRef":
        return ImageRef(name=component)

    @staticmethod
    def from_registry(repository: str) -> "ImageRef":
        return ImageRef(name=repository, pulled=True)

    def address(self, tag: str) -> str:
        return f"{self.name}:{tag}"


@dataclass(frozen=True)
class MountedFile:
    #: path of the file relative to the root of the source tree
    source: str

    #: absolute path inside the container
    target: str

    #: ``None`` mounts the file always, ``True`` only with debugging enabled
    #: and ``False`` only with debugging disabled
    only_in_debug: bool | None = None

    def __post_init__(self) -> None:
        _check_target(self.target)


@dataclass(frozen=True)
class MountedDirectory:
    source: str
    target: str

    def __post_init__(self) -> None:
        _check_target(self.target)


@dataclass(frozen=True)
class ExposedPort:
    port: int

    #: Don't wait for the port to accept connections when the service starts
    skip_healthcheck: bool = False

    #: Debug ports are only exposed when debugging is enabled
    debug: bool = False

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port number {self.port}")


@dataclass(frozen=True)
class ServiceBinding:
    """Makes the service of ``component`` reachable under the hostname
    ``alias``.

    """

    alias: str
    component: str


@dataclass(frozen=True)
class ServiceDescriptor:
    """Everything needed to start one component of the development
    environment.

    """

    #: Name of the component, used to look it up and as the default hostname
    name: str

    image: ImageRef

    mounted_files: tuple[MountedFile, ...] = ()

    mounted_directories: tuple[MountedDirectory, ...] = ()

    exposed_ports: tuple[ExposedPort, ...] = ()

    #: Ports that the image exposes but that must not be exposed in the
    #: development topology
    withheld_ports: tuple[int, ...] = ()

    #: Environment variables as (name, value) pairs, in the order in which
    #: they are set
    env: tuple[tuple[str, str], ...] = ()

    #: Commands that are run in the container before it is turned into a
    #: service
    setup_execs: tuple[tuple[str, ...], ...] = ()

    #: The entrypoint, the image's entrypoint is used if empty
    entrypoint: tuple[str, ...] = ()

    #: Replaces :py:attr:`entrypoint` when debugging is enabled
    debug_entrypoint: tuple[str, ...] = ()

    #: Grant the container root capabilities
    insecure_root_capabilities: bool = False

    #: Bindings to other services, only applied when bindings are enabled
    bindings: tuple[ServiceBinding, ...] = ()

    pretty_name: str = ""

    def __post_init__(self) -> None:
        if not self.pretty_name:
            object.__setattr__(self, "pretty_name", self.name)

        exposed = {p.port for p in self.exposed_ports}
        if both := exposed.intersection(self.withheld_ports):
            raise ValueError(
                f"{self.name}: ports {sorted(both)} are both exposed and withheld"
            )
        if invalid := [p for p in self.withheld_ports if not 0 < p < 65536]:
            raise ValueError(f"{self.name}: invalid withheld ports {invalid}")

        for debug in (True, False):
            targets = self.mount_targets(debug)
            if len(targets) != len(set(targets)):
                raise ValueError(
                    f"{self.name}: duplicate mount targets in {targets}"
                )

        if self.debug_entrypoint and not self.entrypoint:
            raise ValueError(
                f"{self.name}: a debug entrypoint requires a regular entrypoint"
            )

    def files(self, debug: bool) -> list[MountedFile]:
        """The files that are mounted with debugging ``debug``."""
        return [f for f in self.mounted_files if _in_mode(f.only_in_debug, debug)]

    def ports(self, debug: bool) -> list[ExposedPort]:
        return [p for p in self.exposed_ports if debug or not p.debug]

    def port_numbers(self, debug: bool) -> set[int]:
        return {p.port for p in self.ports(debug)}

    def entrypoint_for(self, debug: bool) -> tuple[str, ...]:
        if debug and self.debug_entrypoint:
            return self.debug_entrypoint
        return self.entrypoint

    def mount_targets(self, debug: bool) -> list[str]:
        return [f.target for f in self.files(debug)] + [
            d.target for d in self.mounted_directories
        ]
