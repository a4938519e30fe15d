"""
errors.py — Request Errors
===========================
Domain outcomes (full tree, missing key, …) are OpResults, never
exceptions.  These classes cover the other kind of failure: a caller
asking for something that does not exist or passing unusable arguments.
"""


class VisualizerError(Exception):
    """Base class for every error the session layer raises."""


class UnknownStructureError(VisualizerError, KeyError):
    def __init__(self, structure: str):
        super().__init__(structure)
        self.structure = structure

    def __str__(self) -> str:
        return f"Unknown structure: {self.structure}"


class UnknownOperationError(VisualizerError, KeyError):
    def __init__(self, structure: str, operation: str):
        super().__init__(f"{structure}.{operation}")
        self.structure = structure
        self.operation = operation

    def __str__(self) -> str:
        return f"Unknown operation for {self.structure}: {self.operation}"


class InvalidArgumentError(VisualizerError, ValueError):
    """Missing or unconvertible operation parameter."""
