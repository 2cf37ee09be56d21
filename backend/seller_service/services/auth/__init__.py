from .dto import AuthOut, LogoutIn, RefreshIn, SigninIn, SignupIn
from .service import AuthService

__all__ = ["AuthOut", "AuthService", "LogoutIn", "RefreshIn", "SigninIn", "SignupIn"]
