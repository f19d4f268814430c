"""
Records (stored-procedure rows) and transfer models (HTTP payloads) for every entity.

    from ecommerce.models import Brand, BrandModel, EditBrandModel, PaginationModel
"""

from .common import FilterRequest, PaginationModel, RecordModel, ResponseEnvelope, TransferModel
from .brand import Brand, BrandDetailsModel, BrandModel, EditBrandModel
from .category import Category, CategoryModel, EditCategoryModel
from .supplier import EditSupplierModel, Supplier, SupplierModel
from .product import EditProductModel, Product, ProductDetailsModel, ProductModel
from .purchase_order import (
    EditPurchaseOrderLineModel,
    EditPurchaseOrderModel,
    PurchaseOrder,
    PurchaseOrderDetailsModel,
    PurchaseOrderLine,
    PurchaseOrderLineModel,
    PurchaseOrderModel,
)
from .promotion import EditPromotionModel, Promotion, PromotionModel
from .role import EditRoleModel, Role, RoleModel
from .user import EditProfileModel, EditUserModel, User, UserModel, UserRegistrationModel

__all__ = [
    "FilterRequest",
    "PaginationModel",
    "RecordModel",
    "ResponseEnvelope",
    "TransferModel",
    "Brand",
    "BrandDetailsModel",
    "BrandModel",
    "EditBrandModel",
    "Category",
    "CategoryModel",
    "EditCategoryModel",
    "EditSupplierModel",
    "Supplier",
    "SupplierModel",
    "EditProductModel",
    "Product",
    "ProductDetailsModel",
    "ProductModel",
    "EditPurchaseOrderLineModel",
    "EditPurchaseOrderModel",
    "PurchaseOrder",
    "PurchaseOrderDetailsModel",
    "PurchaseOrderLine",
    "PurchaseOrderLineModel",
    "PurchaseOrderModel",
    "EditPromotionModel",
    "Promotion",
    "PromotionModel",
    "EditRoleModel",
    "Role",
    "RoleModel",
    "EditProfileModel",
    "EditUserModel",
    "User",
    "UserModel",
    "UserRegistrationModel",
]
