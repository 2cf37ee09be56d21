from seller_service.models.product import Product
from seller_service.models.refresh_token import RefreshToken
from seller_service.models.seller import Seller

__all__ = ["Product", "RefreshToken", "Seller"]
