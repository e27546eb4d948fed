from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.applications.update_category import UpdateCategoryService
from front_desk.category.domain import CategoryId
from front_desk.category.handlers.request_models import CategoryRequest
from front_desk.category.handlers.response_models import (
    CategoryData,
    CategoryResponse,
)
from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

repository = DynamoDBRoomCategoryRepository()
service = UpdateCategoryService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室カテゴリ更新 Lambda ハンドラ"""
    category_id = CategoryId(path_parameter(event, "category_id"))
    logger.info("Received update category request", extra={"category_id": str(category_id)})

    request = CategoryRequest.model_validate_json(event.body or "{}")
    category = service.update(category_id, name=request.category, status=request.status.value)

    body = CategoryResponse(category=CategoryData.from_entity(category))
    return api_response(200, body.to_body())
