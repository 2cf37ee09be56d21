from .dto import AuthTokenConfig, RotationOut
from .service import TokenService

__all__ = ["AuthTokenConfig", "RotationOut", "TokenService"]
