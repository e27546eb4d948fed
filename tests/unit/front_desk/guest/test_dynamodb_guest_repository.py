from datetime import date
from unittest.mock import MagicMock

from front_desk.guest.domain import GrcNo, GuestFactory
from front_desk.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)


class TestDynamoDBGuestRepository:
    def test_item_round_trip(self, guest_details):
        table = MagicMock()
        repository = DynamoDBGuestRepository(table=table)
        guest = GuestFactory().create(GrcNo("GRC-001"), guest_details)
        guest.record_visit(date(2024, 7, 1))

        repository.save(guest)
        item = table.put_item.call_args.kwargs["Item"]

        assert item["PK"] == "GUEST#GRC-001"
        assert item["GSI1PK"] == "GUESTS"
        assert item["last_visit"] == "2024-07-01"

        table.get_item.return_value = {"Item": item}
        loaded = repository.find_by_id(GrcNo("GRC-001"))

        assert loaded.name == "Asha Rao"
        assert loaded.contact.email == "asha@example.com"
        assert loaded.visit_stats.total_visits == 1
        assert loaded.visit_stats.last_visit == date(2024, 7, 1)

    def test_first_time_guest_has_no_last_visit(self, guest_details):
        table = MagicMock()
        guest = GuestFactory().create(GrcNo("GRC-002"), guest_details)

        DynamoDBGuestRepository(table=table).save(guest)

        assert "last_visit" not in table.put_item.call_args.kwargs["Item"]
