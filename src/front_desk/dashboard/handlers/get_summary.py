from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from front_desk.dashboard.applications.dashboard_summary import (
    DashboardSummaryService,
)
from front_desk.dashboard.domain import RevenuePeriod
from front_desk.dashboard.handlers.response_models import DashboardResponse
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import (
    api_error_handler,
    api_response,
    hotel_today,
    query_parameter,
)

logger = Logger()

service = DashboardSummaryService(
    booking_repository=DynamoDBBookingRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ダッシュボード集計 Lambda ハンドラ（?period=weekly|monthly|yearly）"""
    period = RevenuePeriod((query_parameter(event, "period") or "monthly").lower())
    logger.info("Building dashboard summary", extra={"period": period.value})

    summary = service.summarize(hotel_today(), period)
    return api_response(200, DashboardResponse.from_summary(summary).to_body())
