from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.room.applications.create_room import CreateRoomService
from front_desk.room.domain import RoomFactory
from front_desk.room.handlers.request_models import RoomRequest
from front_desk.room.handlers.response_models import RoomData, RoomResponse
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response

logger = Logger()

service = CreateRoomService(
    repository=DynamoDBRoomRepository(),
    category_repository=DynamoDBRoomCategoryRepository(),
    factory=RoomFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室登録 Lambda ハンドラ"""
    logger.info("Received create room request")

    request = RoomRequest.model_validate_json(event.body or "{}")
    room = service.create(request.to_details())

    logger.info("Room created", extra={"room_id": str(room.id)})
    return api_response(201, RoomResponse(room=RoomData.from_entity(room)).to_body())
