"""
Shared errors and logging configuration for the record pipeline.

Every error raised by the record, function and pipeline modules derives from
PipelineError and from the closest builtin exception, so callers can catch
either.
"""

import logging
import sys


class PipelineError(Exception):
    """Base class for record and pipeline errors."""
    pass


class DuplicateFieldError(PipelineError, ValueError):
    """Raised when a record is built with the same field name twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate field '{name}'")


class UnknownFieldError(PipelineError, AttributeError):
    """Raised when reading or writing a field the record was not built with."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Record has no field '{name}'")


class UnknownMethodError(PipelineError, AttributeError):
    """Raised when a record's method table has no entry for a method name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Record has no method '{name}'")


class ArityError(PipelineError, TypeError):
    """Raised when a function value is called with the wrong argument count."""

    def __init__(self, function_name: str, expected: int, got: int):
        self.function_name = function_name
        self.expected = expected
        self.got = got
        super().__init__(
            f"{function_name}() takes {expected} argument(s) but {got} were given"
        )


class ExhaustedIteratorError(PipelineError, RuntimeError):
    """Raised when a single-pass pipeline is driven a second time."""
    pass


class EmptySequenceError(PipelineError, ValueError):
    """Raised by reduce() on an empty sequence with no initial value."""
    pass


# Configure structured logging
def setup_logging(level=logging.INFO):
    """Setup logging for the record pipeline"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    return logging.getLogger('record_pipeline')


logger = setup_logging()
