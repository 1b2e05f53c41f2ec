"""Versions of the tools and images used by the Harbor development
environment.

All values are plain module level constants. The download urls of the
vulnerability scanner and its adapter are derived from the pinned versions
once at import time via :py:func:`trivy_download_url` and
:py:func:`trivy_adapter_download_url`.

"""

from pathlib import Path

GOLANGCILINT_VERSION = "v1.61.0"
GO_VERSION = "1.23.2"
SYFT_VERSION = "v1.9.0"
GORELEASER_VERSION = "v2.3.2"

#: version of the upstream registry from which the source code is pulled
REGISTRY_SRC_TAG = "v2.8.3"

#: git repository of the upstream distribution code
DISTRIBUTION_SRC = "https://github.com/distribution/distribution.git"

NPM_REGISTRY = "https://registry.npmjs.org"

TRIVY_VERSION = "v0.56.1"
TRIVY_ADAPTER_VERSION = "v0.32.0-rc.1"

DEV_PLATFORM = "linux/amd64"

#: tag of the locally built component images
DEV_VERSION = "dev"

DEBUG = True

#: port on which the debugger of the core service and the proxy listen
DEBUG_PORT = 4001

#: release of the prebuilt database and cache images
HARBOR_RELEASE = "v2.12.2"

POSTGRES_PASSWORD = "root123"


def strip_version_prefix(ver: str) -> str:
    """Remove a single leading ``v`` from ``ver``:

    >>> strip_version_prefix("v0.56.1")
    '0.56.1'
    >>> strip_version_prefix("0.56.1")
    '0.56.1'

    """
    return ver.removeprefix("v")


def trivy_download_url(ver: str) -> str:
    """Url of the 64bit Linux release tarball of trivy ``ver``. The version
    may be given with or without the ``v`` prefix.

    """
    no_prefix = strip_version_prefix(ver)
    return (
        f"https://github.com/aquasecurity/trivy/releases/download/v{no_prefix}"
        f"/trivy_{no_prefix}_Linux-64bit.tar.gz"
    )


def trivy_adapter_download_url(ver: str) -> str:
    return f"https://github.com/goharbor/harbor-scanner-trivy/archive/refs/tags/v{strip_version_prefix(ver)}.tar.gz"


TRIVY_VERSION_NO_PREFIX = strip_version_prefix(TRIVY_VERSION)
TRIVY_DOWNLOAD_URL = trivy_download_url(TRIVY_VERSION)
TRIVY_ADAPTER_DOWNLOAD_URL = trivy_adapter_download_url(TRIVY_ADAPTER_VERSION)

USER_HOME_DIR = Path.home()

#: all pinned versions and urls, in the order in which ``harbor-devenv
#: versions`` prints them
ALL_VERSIONS: dict[str, str] = {
    "GOLANGCILINT_VERSION": GOLANGCILINT_VERSION,
    "GO_VERSION": GO_VERSION,
    "SYFT_VERSION": SYFT_VERSION,
    "GORELEASER_VERSION": GORELEASER_VERSION,
    "REGISTRY_SRC_TAG": REGISTRY_SRC_TAG,
    "DISTRIBUTION_SRC": DISTRIBUTION_SRC,
    "NPM_REGISTRY": NPM_REGISTRY,
    "TRIVY_VERSION": TRIVY_VERSION,
    "TRIVY_ADAPTER_VERSION": TRIVY_ADAPTER_VERSION,
    "TRIVY_DOWNLOAD_URL": TRIVY_DOWNLOAD_URL,
    "TRIVY_ADAPTER_DOWNLOAD_URL": TRIVY_ADAPTER_DOWNLOAD_URL,
    "DEV_PLATFORM": DEV_PLATFORM,
    "DEV_VERSION": DEV_VERSION,
    "DEBUG_PORT": str(DEBUG_PORT),
    "HARBOR_RELEASE": HARBOR_RELEASE,
}
