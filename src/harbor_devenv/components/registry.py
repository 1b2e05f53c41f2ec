"""The registry and the registry controller"""

from harbor_devenv.components.jobservice import JOBSERVICE_ENV_FILE
from harbor_devenv.components.paths import CONFIG_DIR
from harbor_devenv.components.paths import ENV_FILE_TARGET
from harbor_devenv.components.paths import REGISTRY_CONFIG_DIR
from harbor_devenv.components.paths import RUN_ENV_SCRIPT
from harbor_devenv.components.paths import RUN_SCRIPT_TARGET
from harbor_devenv.descriptor import ExposedPort
from harbor_devenv.descriptor import ImageRef
from harbor_devenv.descriptor import MountedDirectory
from harbor_devenv.descriptor import MountedFile
from harbor_devenv.descriptor import ServiceDescriptor

_REGISTRY_CONFIG = MountedDirectory(REGISTRY_CONFIG_DIR, "/etc/registry")
_REGISTRYCTL_CONFIG_TARGET = "/etc/registryctl/config.yml"

REGISTRY = ServiceDescriptor(
    name="registry",
    pretty_name="Registry",
    image=ImageRef.built("registry"),
    mounted_directories=(_REGISTRY_CONFIG,),
    exposed_ports=(ExposedPort(5000),),
    # 5001 is the debug endpoint of the registry configuration
    withheld_ports=(5001, 5443),
)

REGISTRYCTL = ServiceDescriptor(
    name="registryctl",
    pretty_name="Registry Controller",
    image=ImageRef.built("registryctl"),
    mounted_directories=(_REGISTRY_CONFIG,),
    mounted_files=(
        MountedFile(
            f"{CONFIG_DIR}/registryctl/config.yml", _REGISTRYCTL_CONFIG_TARGET
        ),
        # shares the environment with the job service
        MountedFile(JOBSERVICE_ENV_FILE, ENV_FILE_TARGET),
        MountedFile(RUN_ENV_SCRIPT, RUN_SCRIPT_TARGET),
    ),
    entrypoint=(RUN_SCRIPT_TARGET, f"/registryctl -c {_REGISTRYCTL_CONFIG_TARGET}"),
)
