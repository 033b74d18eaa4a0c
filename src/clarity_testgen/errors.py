class GenerationError(Exception):
    """Raised when a test suite cannot be generated"""


class TestFunctionArgumentsError(GenerationError):
    """A `test-` function declares arguments the generated call cannot supply"""

    __test__ = False

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(
            f"Test functions cannot take arguments. (Offending function: {function_name})"
        )


class DuplicateTestNameError(GenerationError):
    """Two `test-` functions map to the same pytest function name"""

    def __init__(self, contract_name: str, test_name: str, function_names):
        self.contract_name = contract_name
        self.test_name = test_name
        self.function_names = tuple(function_names)
        super().__init__(
            f"Functions {', '.join(self.function_names)} in {contract_name} "
            f"all generate the pytest function {test_name}"
        )


class ProjectError(GenerationError):
    """The Clarinet project or interface file could not be read"""
