"""
Defaults shared by the Clarity test generator
"""

TARGET_FOLDER = ".test"
DEPS_MODULE = "deps"
TEST_CONTRACT_SUFFIX = "_test"
TEST_FUNCTION_PREFIX = "test-"
DEFAULT_PREPARE_FUNCTION = "prepare"
DEFAULT_CALLER = "deployer"

# Clarinet devnet deployer
DEFAULT_DEPLOYER_ADDRESS = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

HARNESS_MODULE = "clarinet"

BOOTSTRAP_CONTROLLER = "sbtc-controller"
BOOTSTRAP_FUNCTION = "upgrade"
BOOTSTRAP_CONTRACTS = (
    ".sbtc-token",
    ".sbtc-peg-in-processor",
    ".sbtc-peg-out-processor",
    ".sbtc-registry",
    ".sbtc-stacking-pool",
    ".sbtc-testnet-debug-controller",
)

WARNING_TEXT = """# Code generated using `clarity-generate-tests`
# Manual edits will be lost."""

__all__ = [
    'TARGET_FOLDER',
    'DEPS_MODULE',
    'TEST_CONTRACT_SUFFIX',
    'TEST_FUNCTION_PREFIX',
    'DEFAULT_PREPARE_FUNCTION',
    'DEFAULT_CALLER',
    'DEFAULT_DEPLOYER_ADDRESS',
    'HARNESS_MODULE',
    'BOOTSTRAP_CONTROLLER',
    'BOOTSTRAP_FUNCTION',
    'BOOTSTRAP_CONTRACTS',
    'WARNING_TEXT',
]
