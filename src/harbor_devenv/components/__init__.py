"""All components of the Harbor development environment.

Every component is a :py:class:`~harbor_devenv.descriptor.ServiceDescriptor`
in one of the submodules and is registered in :py:const:`ALL_COMPONENTS`.

"""

from harbor_devenv.descriptor import ServiceDescriptor

from .core import CORE
from .database import POSTGRES
from .database import REDIS
from .jobservice import JOBSERVICE
from .proxy import NGINX
from .proxy import PORTAL
from .registry import REGISTRY
from .registry import REGISTRYCTL

ALL_COMPONENTS: dict[str, ServiceDescriptor] = {
    desc.name: desc
    for desc in (
        NGINX,
        PORTAL,
        JOBSERVICE,
        CORE,
        REGISTRYCTL,
        POSTGRES,
        REDIS,
        REGISTRY,
    )
}

SORTED_COMPONENT_NAMES = sorted(ALL_COMPONENTS)


def get_component(name: str) -> ServiceDescriptor:
    if name not in ALL_COMPONENTS:
        raise ValueError(
            f"Unknown component {name}, expected one of {', '.join(SORTED_COMPONENT_NAMES)}"
        )
    return ALL_COMPONENTS[name]
