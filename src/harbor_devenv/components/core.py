"""The core service.

The image is based on alpine and not on golang, the migration of the
database fails otherwise with::

    [FATAL] [/src/core/main.go:203]: failed to migrate the database, error: open .: no such file or directory

"""

from harbor_devenv.components.paths import CONFIG_DIR
from harbor_devenv.components.paths import ENV_FILE_TARGET
from harbor_devenv.components.paths import RUN_DEBUG_SCRIPT
from harbor_devenv.components.paths import RUN_ENV_SCRIPT
from harbor_devenv.components.paths import RUN_SCRIPT_TARGET
from harbor_devenv.descriptor import ExposedPort
from harbor_devenv.descriptor import ImageRef
from harbor_devenv.descriptor import MountedFile
from harbor_devenv.descriptor import ServiceBinding
from harbor_devenv.descriptor import ServiceDescriptor
from harbor_devenv.versions import DEBUG_PORT

CORE = ServiceDescriptor(
    name="core",
    pretty_name="Core Service",
    image=ImageRef.built("core"),
    mounted_files=(
        MountedFile(f"{CONFIG_DIR}/core/app.conf", "/etc/core/app.conf"),
        MountedFile(f"{CONFIG_DIR}/core/env", ENV_FILE_TARGET),
        MountedFile(RUN_DEBUG_SCRIPT, RUN_SCRIPT_TARGET, only_in_debug=True),
        MountedFile(RUN_ENV_SCRIPT, RUN_SCRIPT_TARGET, only_in_debug=False),
    ),
    # the health check never succeeds while core waits for its dependencies
    exposed_ports=(
        ExposedPort(8080, skip_healthcheck=True),
        ExposedPort(DEBUG_PORT, skip_healthcheck=True, debug=True),
    ),
    entrypoint=(RUN_SCRIPT_TARGET, "/core"),
    debug_entrypoint=(RUN_SCRIPT_TARGET, "/core", str(DEBUG_PORT)),
    insecure_root_capabilities=True,
    bindings=(
        ServiceBinding("redis", "redis"),
        ServiceBinding("postgresql", "postgresql"),
        ServiceBinding("registry", "registry"),
        ServiceBinding("registryctl", "registryctl"),
    ),
)
