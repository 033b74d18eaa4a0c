import logging
import tomllib
from pathlib import Path
from typing import List, Optional, Union

from .contract import Contract, build_contract, load_interfaces
from .errors import ProjectError
from .utils import DEFAULT_DEPLOYER_ADDRESS

logger = logging.getLogger('clarity_test')

MANIFEST_NAME = 'Clarinet.toml'


def load_manifest(project_dir: Path) -> dict:
    manifest = project_dir / MANIFEST_NAME
    try:
        with open(manifest, 'rb') as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ProjectError(f"No {MANIFEST_NAME} found in {project_dir}") from e
    except tomllib.TOMLDecodeError as e:
        raise ProjectError(f"Invalid {manifest}: {e}") from e


def load_project(project_dir: Union[str, Path], deployer: str = DEFAULT_DEPLOYER_ADDRESS,
                 interfaces_path: Optional[Union[str, Path]] = None) -> List[Contract]:
    """Read every contract declared in a Clarinet project.

    Contracts keep the order of the manifest. When an interface file is
    given its signatures are used, looked up by contract id then by local
    name; otherwise signatures are scanned from the source.
    """
    project_dir = Path(project_dir)
    manifest = load_manifest(project_dir)
    interfaces = load_interfaces(interfaces_path) if interfaces_path else {}

    contracts = []
    for name, settings in manifest.get('contracts', {}).items():
        path = settings.get('path') if isinstance(settings, dict) else None
        if not path:
            raise ProjectError(f"Contract {name} has no path in {MANIFEST_NAME}")
        try:
            source = (project_dir / path).read_text(encoding='utf-8')
        except OSError as e:
            raise ProjectError(f"Cannot read contract {name} from {path}: {e}") from e

        contract_id = f"{deployer}.{name}"
        functions = interfaces.get(contract_id, interfaces.get(name))
        if interfaces and functions is None:
            logger.warning(f"No interface for {contract_id}, scanning source")
        contracts.append(build_contract(contract_id, source, functions))
    logger.debug(f"Loaded {len(contracts)} contracts from {project_dir}")
    return contracts
