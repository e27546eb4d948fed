from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.room.applications.room_calendar import RoomCalendarService
from front_desk.room.domain import RoomId
from front_desk.room.handlers.response_models import (
    CalendarDayData,
    RoomCalendarResponse,
    RoomData,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import (
    api_error_handler,
    api_response,
    hotel_today,
    path_parameter,
    query_parameter,
)

logger = Logger()

service = RoomCalendarService(repository=DynamoDBRoomRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室カレンダー取得 Lambda ハンドラ（?year=&month=、省略時は今月）"""
    room_id = RoomId(path_parameter(event, "room_id"))
    today = hotel_today()
    year = int(query_parameter(event, "year") or today.year)
    month = int(query_parameter(event, "month") or today.month)
    logger.info(
        "Fetching room calendar",
        extra={"room_id": str(room_id), "year": year, "month": month},
    )

    room, days = service.month(room_id, year, month, today)

    body = RoomCalendarResponse(
        room=RoomData.from_entity(room),
        year=year,
        month=month,
        days=[CalendarDayData(day=day, status=status.value) for day, status in days],
    )
    return api_response(200, body.to_body())
