from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from front_desk.booking.domain import BookingId
from front_desk.booking.handlers.request_models import BookingStatusRequest
from front_desk.booking.handlers.response_models import BookingData, BookingResponse
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = UpdateBookingStatusService(
    repository=DynamoDBBookingRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約ステータス変更 Lambda ハンドラ"""
    booking_id = BookingId(path_parameter(event, "booking_id"))
    request = BookingStatusRequest.model_validate_json(event.body or "{}")
    logger.info(
        "Changing booking status",
        extra={"booking_id": str(booking_id), "status": request.status.value},
    )

    booking = service.change_status(booking_id, request.status)
    return api_response(
        200, BookingResponse(booking=BookingData.from_entity(booking)).to_body()
    )
