import argparse
import logging
import sys
from typing import List, Optional

from .config import BootstrapConfig, GeneratorConfig
from .errors import GenerationError
from .project import load_project
from .utils.test_writer import ClarityTestWriter


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    bootstrap = BootstrapConfig()
    if args.no_bootstrap:
        bootstrap = BootstrapConfig(contracts=())
    elif args.bootstrap_contract or args.bootstrap_controller:
        bootstrap = BootstrapConfig(
            controller=args.bootstrap_controller or bootstrap.controller,
            contracts=tuple(args.bootstrap_contract or bootstrap.contracts),
        )
    return GeneratorConfig.from_env(
        harness_module=args.harness,
        target_folder=args.output,
        deployer=args.deployer,
        bootstrap=bootstrap,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate pytest suites from annotated Clarity test contracts")
    parser.add_argument("--project", default=".", help="Clarinet project root (default: .)")
    parser.add_argument("--output", default=None, help="output folder (default: .test)")
    parser.add_argument("--deployer", default=None, help="deployer address used in contract ids")
    parser.add_argument("--interfaces", default=None, help="JSON file with compiled contract interfaces")
    parser.add_argument("--harness", default=None, help="module the generated tests import the simulator from")
    parser.add_argument("--bootstrap-controller", default=None, help="contract receiving the bootstrap call")
    parser.add_argument(
        "--bootstrap-contract",
        action="append",
        default=None,
        help="contract enabled by the bootstrap call (repeatable, replaces the defaults)",
    )
    parser.add_argument("--no-bootstrap", action="store_true", help="generate a no-op bootstrap")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every generated test")
    args = parser.parse_args(argv)

    config = build_config(args)
    writer = ClarityTestWriter(config.target_folder, config)
    if args.verbose:
        writer.logger.setLevel(logging.DEBUG)

    try:
        contracts = load_project(args.project, config.deployer, args.interfaces)
        writer.write(contracts)
    except GenerationError as e:
        writer.logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
