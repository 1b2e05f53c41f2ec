"""Interface to the image build step of the Harbor components.

Building the component images is not done here. The development environment
only asks an :py:class:`ImageBuilder` for a container of a component and
continues to configure it.

"""

from typing import Protocol

import dagger

from harbor_devenv.logger import LOGGER

#: Names of the published images of the Harbor components
COMPONENT_IMAGES: dict[str, str] = {
    "nginx": "goharbor/nginx-photon",
    "portal": "goharbor/harbor-portal",
    "jobservice": "goharbor/harbor-jobservice",
    "core": "goharbor/harbor-core",
    "registryctl": "goharbor/harbor-registryctl",
    "registry": "goharbor/registry-photon",
}


class ImageBuilder(Protocol):
    def build_image(self, platform: str, component: str) -> dagger.Container: ...


class PrebuiltImageBuilder:
    """Uses already built component images ``goharbor/$image:$tag`` instead
    of building them, e.g. the images produced by ``make build`` in a Harbor
    checkout.

    """

    def __init__(self, client: dagger.Client, tag: str) -> None:
        self._client = client
        self._tag = tag

    def build_image(self, platform: str, component: str) -> dagger.Container:
        if component not in COMPONENT_IMAGES:
            raise ValueError(
                f"No image known for the component {component}, expected one of {', '.join(COMPONENT_IMAGES)}"
            )

        address = f"{COMPONENT_IMAGES[component]}:{self._tag}"
        LOGGER.debug("Using prebuilt image %s for %s", address, component)
        return self._client.container(platform=dagger.Platform(platform)).from_(
            address
        )
