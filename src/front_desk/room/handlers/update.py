from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.room.applications.update_room import UpdateRoomService
from front_desk.room.domain import RoomId
from front_desk.room.handlers.request_models import RoomRequest
from front_desk.room.handlers.response_models import RoomData, RoomResponse
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = UpdateRoomService(
    repository=DynamoDBRoomRepository(),
    category_repository=DynamoDBRoomCategoryRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室更新 Lambda ハンドラ"""
    room_id = RoomId(path_parameter(event, "room_id"))
    logger.info("Received update room request", extra={"room_id": str(room_id)})

    request = RoomRequest.model_validate_json(event.body or "{}")
    room = service.update(room_id, request.to_details(), maintenance=request.maintenance)
    return api_response(200, RoomResponse(room=RoomData.from_entity(room)).to_body())
