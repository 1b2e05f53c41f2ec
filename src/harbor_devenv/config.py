"""Settings of the development environment that can be overridden from the
environment.

"""

import os
from dataclasses import dataclass

from packaging import version

from harbor_devenv.versions import DEBUG
from harbor_devenv.versions import DEV_PLATFORM
from harbor_devenv.versions import DEV_VERSION
from harbor_devenv.versions import HARBOR_RELEASE
from harbor_devenv.versions import strip_version_prefix

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _parse_bool(name: str, val: str) -> bool:
    if val.lower() in _TRUE_VALUES:
        return True
    if val.lower() in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: '{val}'")


@dataclass(frozen=True)
class DevEnvConfig:
    #: platform for which the component images are built
    platform: str = DEV_PLATFORM

    #: expose the debugger ports and launch the core service via the debug
    #: wrapper script
    debug: bool = DEBUG

    #: tag of the component images that the image builder produces
    image_tag: str = DEV_VERSION

    #: release tag of the prebuilt database and cache images
    harbor_release: str = HARBOR_RELEASE

    #: bind the services on which the core service depends to it
    enable_bindings: bool = False

    def __post_init__(self) -> None:
        try:
            version.Version(strip_version_prefix(self.harbor_release))
        except version.InvalidVersion as exc:
            raise ValueError(
                f"Invalid harbor release '{self.harbor_release}'"
            ) from exc
        if not self.image_tag:
            raise ValueError("The image tag must not be empty")

    @staticmethod
    def from_env() -> "DevEnvConfig":
        """Create a configuration from the environment variables
        ``HARBOR_DEV_PLATFORM``, ``HARBOR_DEV_DEBUG``, ``HARBOR_DEV_IMAGE_TAG``,
        ``HARBOR_DEV_RELEASE`` and ``HARBOR_DEV_BINDINGS``. Unset variables
        fall back to the defaults.

        """
        kwargs: dict[str, str | bool] = {}
        if platform := os.getenv("HARBOR_DEV_PLATFORM"):
            kwargs["platform"] = platform
        if (debug := os.getenv("HARBOR_DEV_DEBUG")) is not None:
            kwargs["debug"] = _parse_bool("HARBOR_DEV_DEBUG", debug)
        if image_tag := os.getenv("HARBOR_DEV_IMAGE_TAG"):
            kwargs["image_tag"] = image_tag
        if release := os.getenv("HARBOR_DEV_RELEASE"):
            kwargs["harbor_release"] = release
        if (bindings := os.getenv("HARBOR_DEV_BINDINGS")) is not None:
            kwargs["enable_bindings"] = _parse_bool("HARBOR_DEV_BINDINGS", bindings)

        return DevEnvConfig(**kwargs)
