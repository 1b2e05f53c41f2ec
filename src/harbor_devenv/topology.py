"""Render the wiring of the development environment for humans: a summary
of a single service and a yaml document of the whole topology.

"""

import io

from ruamel.yaml import YAML

from harbor_devenv.components import ALL_COMPONENTS
from harbor_devenv.config import DevEnvConfig
from harbor_devenv.descriptor import ServiceDescriptor
from harbor_devenv.image import COMPONENT_IMAGES
from harbor_devenv.templates import SUMMARY_TEMPLATE
from harbor_devenv.util import write_to_file


def image_address(desc: ServiceDescriptor, config: DevEnvConfig) -> str:
    """The image that the service is started from with the default image
    builder.

    """
    if desc.image.pulled:
        return desc.image.address(config.harbor_release)
    return f"{COMPONENT_IMAGES[desc.image.name]}:{config.image_tag}"


def render_summary(desc: ServiceDescriptor, config: DevEnvConfig) -> str:
    return SUMMARY_TEMPLATE.render(
        desc=desc,
        image=image_address(desc, config),
        files=desc.files(config.debug),
        ports=desc.ports(config.debug),
        entrypoint=desc.entrypoint_for(config.debug),
        bindings_enabled=config.enable_bindings,
    )


def service_to_dict(desc: ServiceDescriptor, config: DevEnvConfig) -> dict:
    res: dict = {
        "image": image_address(desc, config),
        "platform": config.platform,
    }
    if mounts := [f"{f.source}:{f.target}" for f in desc.files(config.debug)] + [
        f"{d.source}/:{d.target}" for d in desc.mounted_directories
    ]:
        res["mounts"] = mounts
    if desc.env:
        res["environment"] = dict(desc.env)
    if desc.setup_execs:
        res["setup"] = [list(cmd) for cmd in desc.setup_execs]
    res["ports"] = sorted(desc.port_numbers(config.debug))
    if desc.withheld_ports:
        res["withheld_ports"] = list(desc.withheld_ports)
    if entrypoint := desc.entrypoint_for(config.debug):
        res["entrypoint"] = list(entrypoint)
    if desc.insecure_root_capabilities:
        res["insecure_root_capabilities"] = True
    if config.enable_bindings and desc.bindings:
        res["bindings"] = {b.alias: b.component for b in desc.bindings}
    return res


def topology_to_dict(config: DevEnvConfig) -> dict:
    return {
        "services": {
            name: service_to_dict(desc, config)
            for name, desc in ALL_COMPONENTS.items()
        }
    }


def dump_topology(config: DevEnvConfig) -> str:
    yaml = YAML(typ="rt")
    yaml.indent(mapping=2, sequence=4, offset=2)

    buf = io.StringIO()
    yaml.dump(topology_to_dict(config), buf)
    return buf.getvalue()


async def write_topology(dest: str, config: DevEnvConfig) -> None:
    await write_to_file(dest, dump_topology(config))
