"""
The application's mapping profile: every record <-> transfer model pair and the
input -> record maps with their after-map hooks.
"""

from decimal import Decimal
from functools import lru_cache

from ecommerce.models import (
    Brand,
    BrandDetailsModel,
    BrandModel,
    Category,
    CategoryModel,
    EditBrandModel,
    EditCategoryModel,
    EditProductModel,
    EditProfileModel,
    EditPromotionModel,
    EditPurchaseOrderLineModel,
    EditPurchaseOrderModel,
    EditRoleModel,
    EditSupplierModel,
    EditUserModel,
    Product,
    ProductDetailsModel,
    ProductModel,
    Promotion,
    PromotionModel,
    PurchaseOrder,
    PurchaseOrderDetailsModel,
    PurchaseOrderLine,
    PurchaseOrderLineModel,
    PurchaseOrderModel,
    Role,
    RoleModel,
    Supplier,
    SupplierModel,
    User,
    UserModel,
    UserRegistrationModel,
)
from ecommerce.utils.security import hash_md5

from .mapper import Mapper, MappingProfile


def _registration_defaults(source: UserRegistrationModel, user: User) -> None:
    user.username = source.email
    user.password_hash = hash_md5(source.password)
    user.email_confirmed = False
    user.avatar = None


def _admin_user_defaults(source: EditUserModel, user: User) -> None:
    # avatar is set by the service once the upload has been moved
    user.email_confirmed = True
    user.password_hash = hash_md5(source.password)
    user.avatar = None
    user.total_amount_owed = Decimal("0")
    user.status = False


def _profile_defaults(source: EditProfileModel, user: User) -> None:
    user.avatar = None
    user.email_confirmed = True


def _order_total(source: EditPurchaseOrderModel, order: PurchaseOrder) -> None:
    order.total_amount = sum(
        (line.quantity * line.unit_price for line in source.details),
        Decimal("0"),
    )


def build_profile() -> MappingProfile:
    profile = MappingProfile()

    # records -> transfer models (and back)
    profile.create_map(Brand, BrandModel, reverse=True)
    profile.create_map(Category, CategoryModel, reverse=True)
    profile.create_map(Supplier, SupplierModel, reverse=True)
    profile.create_map(Product, ProductModel, reverse=True)
    profile.create_map(PurchaseOrder, PurchaseOrderModel, reverse=True)
    profile.create_map(PurchaseOrderLine, PurchaseOrderLineModel, reverse=True)
    profile.create_map(Role, RoleModel, reverse=True)
    profile.create_map(Promotion, PromotionModel, reverse=True)
    profile.create_map(User, UserModel, reverse=True)

    # details rows are usually validated straight into the details model,
    # these cover callers that start from the plain record
    profile.create_map(Brand, BrandDetailsModel)
    profile.create_map(Product, ProductDetailsModel)
    profile.create_map(PurchaseOrder, PurchaseOrderDetailsModel)

    # input -> record
    profile.create_map(EditBrandModel, Brand)
    profile.create_map(EditCategoryModel, Category)
    profile.create_map(EditSupplierModel, Supplier)
    profile.create_map(EditProductModel, Product)
    profile.create_map(EditPurchaseOrderLineModel, PurchaseOrderLine)
    profile.create_map(EditPurchaseOrderModel, PurchaseOrder, after_map=_order_total)
    profile.create_map(EditRoleModel, Role)
    profile.create_map(EditPromotionModel, Promotion)
    profile.create_map(UserRegistrationModel, User, after_map=_registration_defaults)
    profile.create_map(EditUserModel, User, after_map=_admin_user_defaults)
    profile.create_map(EditProfileModel, User, after_map=_profile_defaults)

    return profile


@lru_cache
def get_mapper() -> Mapper:
    return Mapper(build_profile())
