"""Identity service adapters."""
from .identity_service import ContextIdentityService, StaticIdentityService, caller_identity

__all__ = ["ContextIdentityService", "StaticIdentityService", "caller_identity"]
