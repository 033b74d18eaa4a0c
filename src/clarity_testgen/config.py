import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .utils import (
    BOOTSTRAP_CONTRACTS,
    BOOTSTRAP_CONTROLLER,
    BOOTSTRAP_FUNCTION,
    DEFAULT_DEPLOYER_ADDRESS,
    DEPS_MODULE,
    HARNESS_MODULE,
    TARGET_FOLDER,
    TEST_CONTRACT_SUFFIX,
)


@dataclass(frozen=True)
class BootstrapConfig:
    """Administrative call every generated test issues before running.

    The controller contract is called as `<deployer>.<controller>` with a
    list of `{contract, enabled: true}` tuples, one per entry of `contracts`.
    An empty `contracts` tuple turns `bootstrap` into a no-op.
    """
    controller: str = BOOTSTRAP_CONTROLLER
    function: str = BOOTSTRAP_FUNCTION
    contracts: Tuple[str, ...] = BOOTSTRAP_CONTRACTS

    @property
    def enabled(self) -> bool:
        return bool(self.contracts)


@dataclass(frozen=True)
class GeneratorConfig:
    harness_module: str = HARNESS_MODULE
    deps_module: str = DEPS_MODULE
    target_folder: str = TARGET_FOLDER
    test_contract_suffix: str = TEST_CONTRACT_SUFFIX
    deployer: str = DEFAULT_DEPLOYER_ADDRESS
    bootstrap: BootstrapConfig = field(default_factory=BootstrapConfig)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "GeneratorConfig":
        """Build a config from CLARITY_TESTGEN_* variables; keyword overrides win."""
        env = os.environ if environ is None else environ
        values = {
            'harness_module': env.get('CLARITY_TESTGEN_HARNESS') or HARNESS_MODULE,
            'target_folder': env.get('CLARITY_TESTGEN_OUTPUT') or TARGET_FOLDER,
            'deployer': env.get('CLARITY_TESTGEN_DEPLOYER') or DEFAULT_DEPLOYER_ADDRESS,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
