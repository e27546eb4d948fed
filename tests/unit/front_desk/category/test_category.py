import pytest

from front_desk.category.domain import (
    CategoryName,
    CategoryStatus,
    RoomCategoryFactory,
)


class TestRoomCategory:
    def test_factory_creates_active_category(self):
        category = RoomCategoryFactory().create(name="Suite")

        assert str(category.name) == "Suite"
        assert category.is_active

    def test_rename_and_deactivate(self, create_category):
        category = create_category()
        category.rename(CategoryName("Super Deluxe"))
        category.change_status(CategoryStatus.INACTIVE)

        assert str(category.name) == "Super Deluxe"
        assert not category.is_active

    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError):
            CategoryName(name)
