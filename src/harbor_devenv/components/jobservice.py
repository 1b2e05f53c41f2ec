"""The job service"""

from harbor_devenv.components.paths import CONFIG_DIR
from harbor_devenv.components.paths import ENV_FILE_TARGET
from harbor_devenv.components.paths import RUN_ENV_SCRIPT
from harbor_devenv.components.paths import RUN_SCRIPT_TARGET
from harbor_devenv.descriptor import ExposedPort
from harbor_devenv.descriptor import ImageRef
from harbor_devenv.descriptor import MountedDirectory
from harbor_devenv.descriptor import MountedFile
from harbor_devenv.descriptor import ServiceDescriptor

JOBSERVICE_CONFIG_DIR = f"{CONFIG_DIR}/jobservice"
JOBSERVICE_ENV_FILE = f"{JOBSERVICE_CONFIG_DIR}/env"
_CONFIG_TARGET = "/etc/jobservice/config.yml"

JOBSERVICE = ServiceDescriptor(
    name="jobservice",
    pretty_name="Job Service",
    image=ImageRef.built("jobservice"),
    mounted_files=(
        MountedFile(f"{JOBSERVICE_CONFIG_DIR}/config.yml", _CONFIG_TARGET),
        MountedFile(JOBSERVICE_ENV_FILE, ENV_FILE_TARGET),
        MountedFile(RUN_ENV_SCRIPT, RUN_SCRIPT_TARGET),
    ),
    mounted_directories=(MountedDirectory(JOBSERVICE_CONFIG_DIR, "/var/log/jobs"),),
    setup_execs=(("chmod", "+x", RUN_SCRIPT_TARGET),),
    exposed_ports=(ExposedPort(8080),),
    entrypoint=(RUN_SCRIPT_TARGET, f"/jobservice -c {_CONFIG_TARGET}"),
)
