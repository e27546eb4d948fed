from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.applications.create_booking import CreateBookingService
from front_desk.booking.domain import BookingFactory
from front_desk.booking.handlers.request_models import BookingRequest
from front_desk.booking.handlers.response_models import BookingData, BookingResponse
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.guest.applications.register_guest_visit import (
    RegisterGuestVisitService,
)
from front_desk.guest.domain import GuestFactory
from front_desk.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from front_desk.room.domain import RoomId
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, hotel_today

logger = Logger()

service = CreateBookingService(
    repository=DynamoDBBookingRepository(),
    room_repository=DynamoDBRoomRepository(),
    factory=BookingFactory(),
    guest_service=RegisterGuestVisitService(
        repository=DynamoDBGuestRepository(), factory=GuestFactory()
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """宿泊予約作成 Lambda ハンドラ"""
    logger.info("Received create booking request")

    request = BookingRequest.model_validate_json(event.body or "{}")
    booking = service.create(RoomId(request.room_id), request.to_details(hotel_today()))

    logger.info(
        "Booking created",
        extra={"booking_id": str(booking.id), "room_id": str(booking.room_id)},
    )
    return api_response(
        201, BookingResponse(booking=BookingData.from_entity(booking)).to_body()
    )
