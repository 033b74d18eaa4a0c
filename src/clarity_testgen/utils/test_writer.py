import os
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .annotations import apply_prepare_defaults, extract_test_annotations
from .test_generator import generate_deps, generate_header, generate_test, python_test_name
from ..config import GeneratorConfig
from ..contract import Contract
from ..errors import DuplicateTestNameError, TestFunctionArgumentsError

logger = logging.getLogger('clarity_test')


def generate_module(contract: Contract, config: Optional[GeneratorConfig] = None) -> str:
    """Source of the pytest module covering every `test-` function of a contract"""
    annotations = extract_test_annotations(contract.source)
    has_default_prepare = contract.has_default_prepare_function

    code = [generate_header(config)]
    test_names: Dict[str, List[str]] = defaultdict(list)
    for function in contract.test_functions():
        if function.args > 0:
            raise TestFunctionArgumentsError(function.name)
        test_names[python_test_name(function.name)].append(function.name)
        function_annotations = apply_prepare_defaults(
            annotations.get(function.name, {}), has_default_prepare)
        logger.debug(f"{contract.name}: {function.name} {function_annotations}")
        code.append(generate_test(contract.contract_id, function.name, function_annotations))

    for test_name, function_names in test_names.items():
        if len(function_names) > 1:
            raise DuplicateTestNameError(contract.name, test_name, function_names)
    return ''.join(code)


class ClarityTestWriter:
    def __init__(self, output_dir: Union[str, Path, None] = None,
                 config: Optional[GeneratorConfig] = None, log_file: bool = True):
        self.config = config or GeneratorConfig()
        self.output_dir = Path(output_dir or self.config.target_folder)
        self.setup_logging(log_file)

    def setup_logging(self, log_file: bool = True):
        """Configure logging with console and optional file handlers"""
        self.logger = logging.getLogger('clarity_test')
        self.logger.setLevel(logging.INFO)
        formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')

        if not any(type(h) is logging.StreamHandler for h in self.logger.handlers):
            ch = logging.StreamHandler()
            ch.setFormatter(formatter)
            self.logger.addHandler(ch)

        if log_file:
            os.makedirs(self.output_dir, exist_ok=True)
            log_path = os.path.abspath(os.path.join(self.output_dir, 'generate.log'))
            if not any(getattr(h, 'baseFilename', None) == log_path for h in self.logger.handlers):
                fh = logging.FileHandler(log_path, encoding='utf-8')
                fh.setFormatter(formatter)
                self.logger.addHandler(fh)

    def generate(self, contracts: Iterable[Contract]) -> Dict[str, str]:
        """Generate every output file in memory, keyed by file name.

        Raises on the first invalid test contract so nothing is written
        for a partially valid project.
        """
        files = {f"{self.config.deps_module}.py": generate_deps(self.config)}
        for contract in contracts:
            if not contract.is_test_contract(self.config.test_contract_suffix):
                continue
            self.logger.info(f"🧪 Generating tests for {contract.name}...")
            try:
                files[f"{contract.name}.py"] = generate_module(contract, self.config)
            except Exception as e:
                self.logger.error(f"❌ Error generating tests for {contract.name}: {str(e)}")
                raise
        return files

    def write(self, contracts: Iterable[Contract]) -> List[Path]:
        files = self.generate(contracts)
        os.makedirs(self.output_dir, exist_ok=True)
        written = []
        for filename, code in files.items():
            path = self.output_dir / filename
            with open(path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(code)
            written.append(path)
        self.logger.info(f"✅ Wrote {len(written) - 1} test modules to {self.output_dir}")
        return written

