"""Command line interface of the development environment:

- ``harbor-devenv list``: print the names of all components
- ``harbor-devenv show $component``: print how a component is wired
- ``harbor-devenv export $dest``: write the whole topology as yaml to ``$dest``
- ``harbor-devenv versions``: print the pinned tool versions and urls
- ``harbor-devenv up --source $harbor_checkout $component...``: start
  components in the Dagger engine and forward their ports to the host

"""

import asyncio
import dataclasses
import sys

import dagger

from harbor_devenv.components import SORTED_COMPONENT_NAMES
from harbor_devenv.components import get_component
from harbor_devenv.composer import DevEnvironment
from harbor_devenv.config import DevEnvConfig
from harbor_devenv.logger import LOGGER
from harbor_devenv.logger import set_verbosity
from harbor_devenv.topology import render_summary
from harbor_devenv.topology import write_topology
from harbor_devenv.versions import ALL_VERSIONS

#: files of the source tree that are never needed by the services
_SOURCE_EXCLUDES = [".git", "src/portal/node_modules", "make/photon"]


async def run_services(
    source_dir: str, components: list[str], config: DevEnvConfig
) -> None:
    """Start ``components`` with the configuration files from the Harbor
    checkout in ``source_dir`` and keep them running until cancelled.

    """
    async with dagger.connection(dagger.Config(log_output=sys.stderr)):
        env = DevEnvironment(
            dagger.dag.host().directory(source_dir, exclude=_SOURCE_EXCLUDES),
            config=config,
        )
        services = [env.service(name) for name in components]
        LOGGER.info("Starting %s", ", ".join(components))
        await asyncio.gather(*(svc.up() for svc in services))


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        "harbor-devenv",
        description="Run the Harbor components as services in the Dagger engine",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Set the verbosity of the logger to stderr",
    )
    parser.add_argument(
        "--no-debug",
        action="store_true",
        help="Don't expose the debugger ports and launch core without the debugger",
    )

    # also accepted after the command, the default must not override a
    # --no-debug given before it
    debug_parent = argparse.ArgumentParser(add_help=False)
    debug_parent.add_argument(
        "--no-debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Don't expose the debugger ports and launch core without the debugger",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all components")
    subparsers.add_parser("versions", help="Print the pinned tool versions")

    show = subparsers.add_parser(
        "show", help="Print the wiring of a component", parents=[debug_parent]
    )
    show.add_argument("component", type=str, nargs=1, choices=SORTED_COMPONENT_NAMES)

    export = subparsers.add_parser(
        "export",
        help="Write the wiring of all components as yaml",
        parents=[debug_parent],
    )
    export.add_argument(
        "destination",
        type=str,
        nargs=1,
        help="File to which the yaml will be written",
    )

    up = subparsers.add_parser(
        "up", help="Start components and forward their ports", parents=[debug_parent]
    )
    up.add_argument(
        "component", type=str, nargs="+", choices=SORTED_COMPONENT_NAMES
    )
    up.add_argument(
        "--source",
        type=str,
        default=".",
        help="Harbor checkout containing the .dagger/config directory",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)

    config = DevEnvConfig.from_env()
    if args.no_debug:
        config = dataclasses.replace(config, debug=False)

    if args.command == "list":
        print("\n".join(SORTED_COMPONENT_NAMES))
    elif args.command == "versions":
        for name, value in ALL_VERSIONS.items():
            print(f"{name}={value}")
    elif args.command == "show":
        print(render_summary(get_component(args.component[0]), config))
    elif args.command == "export":
        asyncio.run(write_topology(args.destination[0], config))
        LOGGER.info("Wrote the topology to %s", args.destination[0])
    elif args.command == "up":
        try:
            asyncio.run(run_services(args.source, args.component, config))
        except KeyboardInterrupt:
            LOGGER.info("Stopped %s", ", ".join(args.component))
        except Exception as exc:
            LOGGER.error("Running %s failed: %s", ", ".join(args.component), exc)
            raise
    else:
        raise ValueError(f"Unknown command {args.command}")
