"""
Entity metadata driving `EntityService` and the HTTP routers.

Adding an entity means adding its models and one `EntityDefinition` here; the
service, the router and the mapping conventions are shared.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from ecommerce.models import (
    Brand,
    BrandDetailsModel,
    BrandModel,
    Category,
    CategoryModel,
    EditBrandModel,
    EditCategoryModel,
    EditProductModel,
    EditPromotionModel,
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
    PurchaseOrderModel,
    RecordModel,
    Role,
    RoleModel,
    Supplier,
    SupplierModel,
    User,
    UserModel,
)


@dataclass(frozen=True)
class EntityDefinition:
    """
    name:              display name used in messages ("brand", "purchase order")
    path:              URL segment under /api/v1 ("brands", "purchase-orders")
    procedure:         stored procedure behind every activity
    record/model/edit_model/details_model: row, output, input and details types
    insert_fields / update_fields: record fields sent (besides Id) on INSERT / UPDATE
    duplicate_fields:  input fields sent with CHECK_DUPLICATE
    asset_field:       record/input field holding an uploaded file reference
    asset_folder:      folder the upload is moved into
    """

    name: str
    path: str
    procedure: str
    record: type[RecordModel]
    model: type[BaseModel]
    edit_model: type[BaseModel]
    insert_fields: tuple[str, ...]
    update_fields: tuple[str, ...]
    duplicate_fields: tuple[str, ...]
    details_model: type[BaseModel] | None = None
    asset_field: str | None = None
    asset_folder: str | None = None

    @property
    def title(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def duplicate_label(self) -> str:
        return " and ".join(field.replace("_", " ") for field in self.duplicate_fields)


BRAND = EntityDefinition(
    name="brand",
    path="brands",
    procedure="sp_Brands",
    record=Brand,
    model=BrandModel,
    edit_model=EditBrandModel,
    details_model=BrandDetailsModel,
    insert_fields=("name", "logo_url", "description"),
    update_fields=("name", "logo_url", "description", "status"),
    duplicate_fields=("name",),
    asset_field="logo_url",
    asset_folder="brands",
)

CATEGORY = EntityDefinition(
    name="category",
    path="categories",
    procedure="sp_Categories",
    record=Category,
    model=CategoryModel,
    edit_model=EditCategoryModel,
    insert_fields=("name", "image", "description", "parent_id"),
    update_fields=("name", "image", "description", "parent_id", "status"),
    duplicate_fields=("name",),
    asset_field="image",
    asset_folder="categories",
)

SUPPLIER = EntityDefinition(
    name="supplier",
    path="suppliers",
    procedure="sp_Suppliers",
    record=Supplier,
    model=SupplierModel,
    edit_model=EditSupplierModel,
    insert_fields=("name", "contact_person", "email", "phone_number", "address"),
    update_fields=("name", "contact_person", "email", "phone_number", "address", "status"),
    duplicate_fields=("name",),
)

PRODUCT = EntityDefinition(
    name="product",
    path="products",
    procedure="sp_Products",
    record=Product,
    model=ProductModel,
    edit_model=EditProductModel,
    details_model=ProductDetailsModel,
    insert_fields=("name", "description", "image", "price", "brand_id", "category_id", "supplier_id"),
    update_fields=("name", "description", "image", "price", "brand_id", "category_id", "supplier_id", "status"),
    duplicate_fields=("name",),
    asset_field="image",
    asset_folder="products",
)

PURCHASE_ORDER = EntityDefinition(
    name="purchase order",
    path="purchase-orders",
    procedure="sp_PurchaseOrders",
    record=PurchaseOrder,
    model=PurchaseOrderModel,
    edit_model=EditPurchaseOrderModel,
    details_model=PurchaseOrderDetailsModel,
    insert_fields=("code", "supplier_id", "order_date", "total_amount", "note", "details"),
    update_fields=("code", "supplier_id", "order_date", "total_amount", "note", "status", "details"),
    duplicate_fields=("code",),
)

ROLE = EntityDefinition(
    name="role",
    path="roles",
    procedure="sp_Roles",
    record=Role,
    model=RoleModel,
    edit_model=EditRoleModel,
    insert_fields=("name", "description"),
    update_fields=("name", "description", "status"),
    duplicate_fields=("name",),
)

PROMOTION = EntityDefinition(
    name="promotion",
    path="promotions",
    procedure="sp_Promotions",
    record=Promotion,
    model=PromotionModel,
    edit_model=EditPromotionModel,
    insert_fields=(
        "user_id",
        "code",
        "discount_type",
        "discount_value",
        "minimum_order_amount",
        "is_active",
        "start_date",
        "end_date",
    ),
    update_fields=(
        "user_id",
        "code",
        "discount_type",
        "discount_value",
        "minimum_order_amount",
        "is_active",
        "start_date",
        "end_date",
    ),
    duplicate_fields=("code",),
)

USER = EntityDefinition(
    name="user",
    path="users",
    procedure="sp_Users",
    record=User,
    model=UserModel,
    edit_model=EditUserModel,
    insert_fields=(
        "username",
        "email",
        "password_hash",
        "first_name",
        "last_name",
        "phone_number",
        "address",
        "avatar",
        "email_confirmed",
        "total_amount_owed",
        "status",
    ),
    # balance and status are not editable through UPDATE
    update_fields=(
        "username",
        "email",
        "password_hash",
        "first_name",
        "last_name",
        "phone_number",
        "address",
        "avatar",
        "email_confirmed",
    ),
    duplicate_fields=("email",),
    asset_field="avatar",
    asset_folder="avatars",
)

DEFINITIONS: dict[str, EntityDefinition] = {
    definition.path: definition
    for definition in (BRAND, CATEGORY, SUPPLIER, PRODUCT, PURCHASE_ORDER, ROLE, PROMOTION, USER)
}


def get_definition(path: str) -> EntityDefinition:
    try:
        return DEFINITIONS[path]
    except KeyError:
        raise LookupError(f"No entity registered under {path!r}") from None
