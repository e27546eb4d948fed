from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.domain import BookingStatus
from front_desk.booking.handlers.response_models import (
    BookingData,
    BookingListResponse,
)
from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, query_parameter

logger = Logger()

repository = DynamoDBBookingRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda ハンドラ（?status= で絞り込み）"""
    status = query_parameter(event, "status")
    logger.info("Listing bookings", extra={"status": status})

    bookings = repository.find_all()
    if status is not None:
        wanted = BookingStatus(status)
        bookings = [b for b in bookings if b.status == wanted]

    body = BookingListResponse(
        bookings=[BookingData.from_entity(b) for b in bookings],
        total_count=len(bookings),
    )
    return api_response(200, body.to_body())
