"""Provider-agnostic chat completion adapters.

Resolve a model name to an adapter kind, translate a uniform
:class:`ChatRequest` into the provider's wire request, and translate raw
responses (or streams) back into uniform chat types.
"""

# adapter must be imported before config: config refers to AdapterKind.
from .adapter import (
    Adapter,
    AdapterConfig,
    AdapterDispatcher,
    AdapterKind,
    ServiceType,
    WebRequestData,
)
from .chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ChatStream,
    ChatStreamEvent,
    ChatStreamResponse,
    MetaUsage,
)
from .config import ConfigSet
from .errors import (
    AdapterError,
    ErrorCode,
    MalformedRequestError,
    MissingCredentialError,
    ParseError,
    ProviderError,
    StreamSetupError,
)
from .client import Client

__version__ = "0.1.0"

__all__ = [
    "Adapter",
    "AdapterConfig",
    "AdapterDispatcher",
    "AdapterKind",
    "ServiceType",
    "WebRequestData",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatStream",
    "ChatStreamEvent",
    "ChatStreamResponse",
    "MetaUsage",
    "ConfigSet",
    "AdapterError",
    "ErrorCode",
    "MalformedRequestError",
    "MissingCredentialError",
    "ParseError",
    "ProviderError",
    "StreamSetupError",
    "Client",
    "__version__",
]
