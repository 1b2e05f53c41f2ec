"""The nginx reverse proxy and the portal, which is served by nginx as
well.

"""

from harbor_devenv.components.paths import NGINX_CONFIG
from harbor_devenv.descriptor import ExposedPort
from harbor_devenv.descriptor import ImageRef
from harbor_devenv.descriptor import MountedFile
from harbor_devenv.descriptor import ServiceDescriptor
from harbor_devenv.versions import DEBUG_PORT

_NGINX_CONF = MountedFile(NGINX_CONFIG, "/etc/nginx/nginx.conf")

NGINX = ServiceDescriptor(
    name="nginx",
    pretty_name="Proxy",
    image=ImageRef.built("nginx"),
    mounted_files=(_NGINX_CONF,),
    exposed_ports=(ExposedPort(8080), ExposedPort(DEBUG_PORT, debug=True)),
    # TLS is terminated nowhere in the development environment
    withheld_ports=(8443,),
)

# FIXME: the portal does not come up with the proxy configuration
PORTAL = ServiceDescriptor(
    name="portal",
    pretty_name="Portal",
    image=ImageRef.built("portal"),
    mounted_files=(_NGINX_CONF,),
    exposed_ports=(ExposedPort(8080),),
    withheld_ports=(8443,),
)
