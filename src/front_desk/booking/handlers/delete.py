from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.applications.delete_booking import DeleteBookingService
from front_desk.booking.domain import BookingId
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = DeleteBookingService(
    repository=DynamoDBBookingRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約削除 Lambda ハンドラ"""
    booking_id = BookingId(path_parameter(event, "booking_id"))
    logger.info("Deleting booking", extra={"booking_id": str(booking_id)})

    service.delete(booking_id)
    return api_response(200, {"success": True, "message": "Booking deleted"})
