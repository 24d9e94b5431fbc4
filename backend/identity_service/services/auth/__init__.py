from identity_service.services.auth.dto import AuthenticationOut, LoginIn, RegisterIn
from identity_service.services.auth.service import AuthenticationService

__all__ = ["AuthenticationOut", "AuthenticationService", "LoginIn", "RegisterIn"]
