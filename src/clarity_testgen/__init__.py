"""
Clarity Smart Contract Test Generation
"""

from .config import BootstrapConfig, GeneratorConfig
from .contract import Contract, FunctionSignature
from .errors import GenerationError, TestFunctionArgumentsError
from .utils.annotations import apply_prepare_defaults, extract_test_annotations
from .utils.test_generator import generate_deps, generate_test
from .utils.test_writer import ClarityTestWriter, generate_module

__version__ = "2.0.0"

__all__ = [
    'BootstrapConfig',
    'ClarityTestWriter',
    'Contract',
    'FunctionSignature',
    'GenerationError',
    'GeneratorConfig',
    'TestFunctionArgumentsError',
    'apply_prepare_defaults',
    'extract_test_annotations',
    'generate_deps',
    'generate_module',
    'generate_test',
]
