import uuid

import pytest
from pydantic import ValidationError

from ecommerce.models import (
    BrandModel,
    EditBrandModel,
    EditPromotionModel,
    PaginationModel,
    PurchaseOrder,
    ResponseEnvelope,
)


class TestPaginationModel:
    """
    Tests covering PaginationModel[T].

    Rationale:
      - totalPages is derived, never stored; items can never exceed pageSize.
    """

    @pytest.mark.parametrize("total, size, pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (23, 5, 5)])
    def test_total_pages(self, total, size, pages):
        page = PaginationModel[int](items=[], page_index=1, page_size=size, total_count=total)
        assert page.total_pages == pages

    def test_items_never_exceed_page_size(self):
        with pytest.raises(ValidationError):
            PaginationModel[int](items=[1, 2, 3], page_index=1, page_size=2, total_count=3)

    def test_window_bounds(self):
        with pytest.raises(ValidationError):
            PaginationModel[int](items=[], page_index=0, page_size=10, total_count=0)
        with pytest.raises(ValidationError):
            PaginationModel[int](items=[], page_index=1, page_size=0, total_count=0)

    def test_camel_case_dump(self):
        page = PaginationModel[BrandModel](items=[BrandModel(name="Acme")], page_index=1, page_size=10, total_count=1)
        dumped = page.model_dump(mode="json", by_alias=True)
        assert set(dumped) == {"items", "pageIndex", "pageSize", "totalCount", "totalPages"}
        assert dumped["items"][0]["name"] == "Acme"


class TestResponseEnvelope:
    """The {statusCode, message, data} body shared by every response."""

    def test_error_status_cannot_carry_data(self):
        with pytest.raises(ValidationError):
            ResponseEnvelope(status_code=404, message="missing", data={"id": 1})

    def test_success_with_nested_model(self):
        brand_id = uuid.uuid4()
        env = ResponseEnvelope(data=BrandModel(id=brand_id, name="Acme", logo_url="brands/a.png"))
        assert env.to_json_dict() == {
            "statusCode": 200,
            "message": "Success",
            "data": {
                "id": str(brand_id),
                "name": "Acme",
                "logoUrl": "brands/a.png",
                "description": None,
                "status": True,
                "created": None,
                "modified": None,
            },
        }


class TestTransferModels:

    def test_accepts_any_case(self):
        assert EditBrandModel.model_validate({"Name": "A"}).name == "A"
        assert EditBrandModel.model_validate({"name": "A", "LogoURL": "temp/x.png"}).logo_url == "temp/x.png"

    def test_name_required(self):
        with pytest.raises(ValidationError):
            EditBrandModel.model_validate({"name": ""})

    def test_promotion_window(self):
        with pytest.raises(ValidationError):
            EditPromotionModel(code="SALE", start_date="2024-05-02T00:00:00", end_date="2024-05-01T00:00:00")

    def test_purchase_order_details_from_json_column(self):
        product_id = uuid.uuid4()
        order = PurchaseOrder.model_validate(
            {"Id": str(uuid.uuid4()), "Code": "PO-1", "Details": f'[{{"ProductId": "{product_id}", "Quantity": 2, "UnitPrice": 3}}]'}
        )
        assert order.details[0].product_id == product_id
        assert PurchaseOrder.model_validate({"Code": "PO-2", "Details": None}).details == []
