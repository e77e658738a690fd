class WorkflowError(RuntimeError):
    """Base class for booking workflow failures that are not business-rule rejections."""
    pass


class UnknownStateError(WorkflowError):
    """Raised when the workflow holds a value that is not one of the known states."""
    pass


class ConfigurationError(WorkflowError):
    """Raised when settings cannot be turned into a working workflow."""
    pass
