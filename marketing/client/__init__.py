from .api import MarketingInteractionsApi, RequestContext
from .coordinator import MutationCoordinator
from .errors import ErrorKind, NotAuthenticated
from .result import Err, Ok, Result

__all__ = [
    "MarketingInteractionsApi",
    "RequestContext",
    "MutationCoordinator",
    "ErrorKind",
    "NotAuthenticated",
    "Ok",
    "Err",
    "Result",
]
