from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.applications.quote_price import QuotePriceService
from front_desk.booking.handlers.request_models import QuoteRequest
from front_desk.booking.handlers.response_models import QuoteResponse
from front_desk.room.domain import RoomId
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response

logger = Logger()

service = QuotePriceService(room_repository=DynamoDBRoomRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """料金見積もり Lambda ハンドラ"""
    request = QuoteRequest.model_validate_json(event.body or "{}")

    quote = service.quote(
        stay=request.stay(),
        rate=request.rate,
        room_id=RoomId(request.room_id) if request.room_id else None,
        number_of_rooms=request.number_of_rooms,
        discount_percent=request.discount_percent,
        advance_paid=request.advance_paid,
    )
    return api_response(200, QuoteResponse.from_quote(quote).to_body())
