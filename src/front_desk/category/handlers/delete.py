from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.applications.delete_category import DeleteCategoryService
from front_desk.category.domain import CategoryId
from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = DeleteCategoryService(
    repository=DynamoDBRoomCategoryRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室カテゴリ削除 Lambda ハンドラ"""
    category_id = CategoryId(path_parameter(event, "category_id"))
    logger.info("Received delete category request", extra={"category_id": str(category_id)})

    service.delete(category_id)
    return api_response(200, {"success": True, "message": "Room category deleted"})
