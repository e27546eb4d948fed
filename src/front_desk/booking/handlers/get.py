from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.domain import BookingId
from front_desk.booking.handlers.response_models import BookingData, BookingResponse
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.shared.domain.exception import ResourceNotFoundException
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

repository = DynamoDBBookingRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約取得 Lambda ハンドラ"""
    booking_id = BookingId(path_parameter(event, "booking_id"))

    booking = repository.find_by_id(booking_id)
    if booking is None:
        raise ResourceNotFoundException(f"Booking not found: {booking_id}")

    return api_response(
        200, BookingResponse(booking=BookingData.from_entity(booking)).to_body()
    )
