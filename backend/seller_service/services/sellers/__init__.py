from .dto import SellerDetailsIn, SellerOut
from .service import SellerService

__all__ = ["SellerDetailsIn", "SellerOut", "SellerService"]
