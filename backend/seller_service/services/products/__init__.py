from .dto import ImageUploadIn, ProductCreateIn, ProductOut, ProductUpdateIn, UploadLimits
from .service import ProductService, ensure_price_rule

__all__ = [
    "ImageUploadIn",
    "ProductCreateIn",
    "ProductOut",
    "ProductService",
    "ProductUpdateIn",
    "UploadLimits",
    "ensure_price_rule",
]
