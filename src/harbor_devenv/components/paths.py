"""Locations of the configuration files of the development environment in
the Harbor source tree and inside the containers.

"""

#: root of the configuration files in the source tree
CONFIG_DIR = ".dagger/config"

#: wrapper that exports the variables from :py:const:`ENV_FILE_TARGET` and
#: then executes its arguments
RUN_ENV_SCRIPT = f"{CONFIG_DIR}/run_env.sh"

#: like :py:const:`RUN_ENV_SCRIPT` but launches the binary under the debugger
RUN_DEBUG_SCRIPT = f"{CONFIG_DIR}/run_debug.sh"

NGINX_CONFIG = f"{CONFIG_DIR}/proxy/nginx.conf"
REGISTRY_CONFIG_DIR = f"{CONFIG_DIR}/registry"

ENV_FILE_TARGET = "/envFile"
RUN_SCRIPT_TARGET = "/run_script"
