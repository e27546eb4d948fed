from unittest.mock import MagicMock

import pytest

from front_desk.category.applications.create_category import CreateCategoryService
from front_desk.category.applications.delete_category import DeleteCategoryService
from front_desk.category.applications.update_category import UpdateCategoryService
from front_desk.category.domain import CategoryId, CategoryStatus, RoomCategoryFactory
from front_desk.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class TestCreateCategoryService:
    def test_create(self, mock_repository):
        service = CreateCategoryService(mock_repository, RoomCategoryFactory())

        category = service.create(name="Executive", status="Inactive")

        assert category.status == CategoryStatus.INACTIVE
        mock_repository.save.assert_called_once_with(category)


class TestUpdateCategoryService:
    def test_update(self, mock_repository, create_category):
        mock_repository.find_by_id.return_value = create_category()

        category = UpdateCategoryService(mock_repository).update(
            CategoryId("cat-deluxe"), name="Premium", status="Active"
        )

        assert str(category.name) == "Premium"
        mock_repository.update.assert_called_once_with(category)

    def test_missing(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        with pytest.raises(ResourceNotFoundException):
            UpdateCategoryService(mock_repository).update(
                CategoryId("nope"), name="x", status="Active"
            )


class TestDeleteCategoryService:
    def test_refuses_while_rooms_use_category(
        self, mock_repository, create_category, create_room
    ):
        mock_repository.find_by_id.return_value = create_category()
        room_repository = MagicMock()
        room_repository.find_by_category.return_value = [create_room()]

        with pytest.raises(BusinessRuleViolationException):
            DeleteCategoryService(mock_repository, room_repository).delete(
                CategoryId("cat-deluxe")
            )
        mock_repository.delete.assert_not_called()

    def test_delete_unused_category(self, mock_repository, create_category):
        mock_repository.find_by_id.return_value = create_category()
        room_repository = MagicMock()
        room_repository.find_by_category.return_value = []

        DeleteCategoryService(mock_repository, room_repository).delete(
            CategoryId("cat-deluxe")
        )

        mock_repository.delete.assert_called_once_with(CategoryId("cat-deluxe"))
