from .chain import ReportSettings, chain_messages, format_chain, iter_chain, log_chain, root_cause
from .context import Context, Message, into_error, wrap
from .error_utils import ctx, raise_with_context, with_ctx
from .result import Err, Ok, Result, UnwrapError, try_call

__all__ = [
    "Context",
    "Err",
    "Message",
    "Ok",
    "ReportSettings",
    "Result",
    "UnwrapError",
    "chain_messages",
    "ctx",
    "format_chain",
    "into_error",
    "iter_chain",
    "log_chain",
    "raise_with_context",
    "root_cause",
    "try_call",
    "with_ctx",
    "wrap",
]
