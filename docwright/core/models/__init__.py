from .enums        import Category, SaveOutcome, ToolName
from .invocation   import RawInvocation
from .save_request import SaveRequest
from .save_result  import SaveResult

__all__ = [
    "Category",
    "SaveOutcome",
    "ToolName",
    "RawInvocation",
    "SaveRequest",
    "SaveResult",
]
