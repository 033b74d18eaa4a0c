"""
Clarity contract model: identifiers, function interfaces, test eligibility
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .errors import ProjectError
from .utils import DEFAULT_PREPARE_FUNCTION, TEST_CONTRACT_SUFFIX, TEST_FUNCTION_PREFIX

ACCESS_BY_KEYWORD = {
    'define-public': 'public',
    'define-read-only': 'read_only',
    'define-private': 'private',
}
DEFINE_PATTERN = re.compile(r'\((define-public|define-read-only|define-private)\s+\(([^\s|()]+)')


@dataclass(frozen=True)
class FunctionSignature:
    name: str
    access: str
    args: int = 0

    @property
    def is_test_function(self) -> bool:
        return self.access == 'public' and self.name.startswith(TEST_FUNCTION_PREFIX)


@dataclass(frozen=True)
class Contract:
    contract_id: str
    source: str
    functions: Tuple[FunctionSignature, ...] = ()

    @property
    def name(self) -> str:
        return get_contract_name(self.contract_id)

    def is_test_contract(self, suffix: str = TEST_CONTRACT_SUFFIX) -> bool:
        return is_test_contract(self.name, suffix)

    @property
    def has_default_prepare_function(self) -> bool:
        return any(
            f.name == DEFAULT_PREPARE_FUNCTION and f.access == 'public' and f.args == 0
            for f in self.functions
        )

    def test_functions(self) -> List[FunctionSignature]:
        """Candidate test functions, last declared first"""
        return [f for f in reversed(self.functions) if f.is_test_function]


def get_contract_name(contract_id: str) -> str:
    return contract_id.split('.')[1]


def is_test_contract(contract_name: str, suffix: str = TEST_CONTRACT_SUFFIX) -> bool:
    return contract_name.endswith(suffix)


def _count_args(source: str, start: int) -> int:
    """Count `(name type)` groups from `start` up to the signature's closing paren"""
    depth = 1
    args = 0
    for char in source[start:]:
        if char == '(':
            depth += 1
            if depth == 2:
                args += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                break
    return args


def scan_interface(source: str) -> Tuple[FunctionSignature, ...]:
    """Read function signatures straight from the contract source.

    Used when no compiled interface is available. Only the declaration
    heads are inspected; declarations on commented-out lines are skipped.
    """
    source = source.replace('\r', '')
    return tuple(
        FunctionSignature(
            name=match.group(2),
            access=ACCESS_BY_KEYWORD[match.group(1)],
            args=_count_args(source, match.end()),
        )
        for match in DEFINE_PATTERN.finditer(source)
        if not _is_commented(source, match.start())
    )


def _is_commented(source: str, position: int) -> bool:
    line_start = source.rfind('\n', 0, position) + 1
    return ';;' in source[line_start:position]


def _signature_from_interface(entry: Dict[str, Any]) -> FunctionSignature:
    args = entry.get('args', [])
    return FunctionSignature(
        name=entry['name'],
        access=entry.get('access', 'private'),
        args=args if isinstance(args, int) else len(args),
    )


def parse_interface(contract_interface: Dict[str, Any]) -> Tuple[FunctionSignature, ...]:
    return tuple(_signature_from_interface(f) for f in contract_interface.get('functions', []))


def load_interfaces(path: Union[str, Path]) -> Dict[str, Tuple[FunctionSignature, ...]]:
    """Load contract interfaces keyed by contract id or local name.

    The file holds `{"<contract>": {"functions": [{"name", "access", "args"}]}}`
    as produced by Clarinet's `contract_interface`.
    """
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
        return {contract: parse_interface(interface) for contract, interface in data.items()}
    except (OSError, ValueError, KeyError, AttributeError, TypeError) as e:
        raise ProjectError(f"Cannot read contract interfaces from {path}: {e}") from e


def build_contract(contract_id: str, source: str,
                   functions: Optional[Iterable[FunctionSignature]] = None) -> Contract:
    if functions is None:
        return Contract(contract_id, source, scan_interface(source))
    return Contract(contract_id, source, tuple(functions))
