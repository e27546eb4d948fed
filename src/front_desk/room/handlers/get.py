from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.room.domain import RoomId
from front_desk.room.handlers.response_models import RoomData, RoomResponse
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.domain.exception import ResourceNotFoundException
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

repository = DynamoDBRoomRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室詳細取得 Lambda ハンドラ"""
    room_id = RoomId(path_parameter(event, "room_id"))
    logger.info("Fetching room", extra={"room_id": str(room_id)})

    room = repository.find_by_id(room_id)
    if room is None:
        raise ResourceNotFoundException(f"Room not found: {room_id}")
    return api_response(200, RoomResponse(room=RoomData.from_entity(room)).to_body())
