"""Content generation for the procedurally built puzzle variants."""

from .models import Message, Role, ProviderConfig
from .llm_client import LLMClient
from .provider import ContentProvider, LLMContentProvider
from .parsing import parse_json_response, extract_json_content

__all__ = [
    "Message",
    "Role",
    "ProviderConfig",
    "LLMClient",
    "ContentProvider",
    "LLMContentProvider",
    "parse_json_response",
    "extract_json_content",
]
