"""Prebuilt database and cache images of the last Harbor release"""

from harbor_devenv.descriptor import ExposedPort
from harbor_devenv.descriptor import ImageRef
from harbor_devenv.descriptor import ServiceDescriptor
from harbor_devenv.versions import POSTGRES_PASSWORD

POSTGRES = ServiceDescriptor(
    name="postgresql",
    pretty_name="PostgreSQL",
    image=ImageRef.from_registry("goharbor/harbor-db"),
    exposed_ports=(ExposedPort(5432),),
    env=(("POSTGRES_PASSWORD", POSTGRES_PASSWORD),),
)

REDIS = ServiceDescriptor(
    name="redis",
    pretty_name="Redis",
    image=ImageRef.from_registry("goharbor/redis-photon"),
    exposed_ports=(ExposedPort(6379),),
)
