"""Unit tests for ProductService.

Covers:
- create_product: happy path, status default, duplicate name.
- update_product: happy path, not found, wrong password, status handling.
- get_product / list_products: delegation and not found.
- delete_product: happy path, not found, wrong password.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.products.dtos import PasswordDTO, ProductPayloadDTO
from modules.products.exceptions import (
    PasswordMismatch,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product, ProductStatus
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "description": "A widget",
        "manager": "Han",
        "password": "right-pass",
    }
    defaults.update(overrides)
    return Product(**defaults)


def _payload(**overrides) -> ProductPayloadDTO:
    data = {
        "name": "Widget",
        "description": "A widget",
        "manager": "Han",
        "password": "right-pass",
    }
    data.update(overrides)
    return ProductPayloadDTO.model_validate(data)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(_payload())

        assert product.name == "Widget"
        assert product.manager == "Han"
        assert product.password == "right-pass"
        mock_repo.get_by_name.assert_called_once_with("Widget")
        mock_repo.save.assert_called_once()

    def test_status_defaults_to_for_sale(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(_payload())

        assert product.status == ProductStatus.FOR_SALE

    def test_keeps_supplied_status(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(_payload(status="SOLD_OUT"))

        assert product.status == ProductStatus.SOLD_OUT

    def test_duplicate_name_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = _make_product()

        with pytest.raises(ProductAlreadyExists, match="Widget"):
            service.create_product(_payload())

        mock_repo.save.assert_not_called()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_replaces_all_fields(self, service, mock_repo):
        existing = _make_product()
        mock_repo.get_for_update.return_value = existing
        mock_repo.save.side_effect = lambda p: p

        dto = _payload(
            name="Gadget",
            description="Now a gadget",
            manager="Jung",
            status="SOLD_OUT",
        )
        product = service.update_product(str(existing.id), dto)

        assert product.name == "Gadget"
        assert product.description == "Now a gadget"
        assert product.manager == "Jung"
        assert product.status == ProductStatus.SOLD_OUT
        assert product.password == "right-pass"
        mock_repo.save.assert_called_once_with(existing)

    def test_status_kept_when_omitted(self, service, mock_repo):
        existing = _make_product(status=ProductStatus.SOLD_OUT)
        mock_repo.get_for_update.return_value = existing
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product(str(existing.id), _payload(name="Renamed"))

        assert product.status == ProductStatus.SOLD_OUT

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product("non-existent-id", _payload())

        mock_repo.save.assert_not_called()

    def test_wrong_password_raises_and_leaves_record(self, service, mock_repo):
        existing = _make_product()
        mock_repo.get_for_update.return_value = existing

        with pytest.raises(PasswordMismatch):
            service.update_product(
                str(existing.id), _payload(name="Hijacked", password="wrong")
            )

        assert existing.name == "Widget"
        mock_repo.save.assert_not_called()


# ===========================================================================
# get_product / list_products
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = _make_product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(str(existing.id)) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.get_product("non-existent-id")


class TestListProducts:
    def test_delegates_to_repo(self, service, mock_repo):
        mock_repo.list.return_value = [_make_product(), _make_product(name="B")]

        result = service.list_products()

        assert len(result) == 2
        mock_repo.list.assert_called_once_with()

    def test_empty_is_not_an_error(self, service, mock_repo):
        mock_repo.list.return_value = []

        assert service.list_products() == []


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success_returns_last_known_state(self, service, mock_repo):
        existing = _make_product()
        mock_repo.get_for_update.return_value = existing
        mock_repo.delete.return_value = True

        deleted = service.delete_product(
            str(existing.id), PasswordDTO(password="right-pass")
        )

        assert deleted is existing
        mock_repo.delete.assert_called_once_with(str(existing.id))

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product("non-existent-id", PasswordDTO(password="x"))

        mock_repo.delete.assert_not_called()

    def test_wrong_password_raises(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _make_product()

        with pytest.raises(PasswordMismatch):
            service.delete_product("some-id", PasswordDTO(password="wrong"))

        mock_repo.delete.assert_not_called()
