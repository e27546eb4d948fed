from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.room.domain import RoomStatus
from front_desk.room.handlers.response_models import RoomData, RoomListResponse
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, query_parameter

logger = Logger()

repository = DynamoDBRoomRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室一覧取得 Lambda ハンドラ（?status= で絞り込み）"""
    status = query_parameter(event, "status")
    logger.info("Listing rooms", extra={"status": status})

    rooms = repository.find_all()
    if status is not None:
        wanted = RoomStatus(status.lower())
        rooms = [room for room in rooms if room.status == wanted]

    body = RoomListResponse(
        rooms=[RoomData.from_entity(room) for room in rooms],
        total_count=len(rooms),
    )
    return api_response(200, body.to_body())
