import json
from datetime import date
from unittest.mock import MagicMock

from front_desk.guest.applications.search_guests import SearchGuestsService
from front_desk.guest.domain import GrcNo, GuestFactory
from front_desk.guest.handlers import get, list_guests


class TestGuestHandlers:
    def test_get_guest(self, monkeypatch, api_event, lambda_context, guest_details):
        guest = GuestFactory().create(GrcNo("GRC-001"), guest_details)
        guest.record_visit(date(2024, 7, 1))
        repository = MagicMock()
        repository.find_by_id.return_value = guest
        monkeypatch.setattr(get, "repository", repository)

        response = get.lambda_handler(
            api_event(path_parameters={"grc_no": "GRC-001"}), lambda_context
        )
        body = json.loads(response["body"])

        assert response["statusCode"] == 200
        assert body["guest"]["grcNo"] == "GRC-001"
        assert body["guest"]["contactDetails"]["phone"] == "9876543210"
        assert body["guest"]["visitStats"] == {"totalVisits": 1, "lastVisit": "2024-07-01"}

    def test_list_guests_with_paging(
        self, monkeypatch, api_event, lambda_context, guest_details
    ):
        repository = MagicMock()
        repository.find_all.return_value = [
            GuestFactory().create(GrcNo("GRC-001"), guest_details)
        ]
        monkeypatch.setattr(list_guests, "service", SearchGuestsService(repository))

        response = list_guests.lambda_handler(
            api_event(query={"name": "asha", "page": "1", "limit": "5"}), lambda_context
        )
        body = json.loads(response["body"])

        assert body["total"] == 1
        assert body["pages"] == 1
        assert body["guests"][0]["name"] == "Asha Rao"

    def test_bad_limit(self, api_event, lambda_context):
        response = list_guests.lambda_handler(
            api_event(query={"limit": "500"}), lambda_context
        )
        assert response["statusCode"] == 400
