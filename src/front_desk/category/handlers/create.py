from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.applications.create_category import CreateCategoryService
from front_desk.category.domain import RoomCategoryFactory
from front_desk.category.handlers.request_models import CategoryRequest
from front_desk.category.handlers.response_models import (
    CategoryData,
    CategoryResponse,
)
from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.shared.utils import api_error_handler, api_response

logger = Logger()

repository = DynamoDBRoomCategoryRepository()
factory = RoomCategoryFactory()
service = CreateCategoryService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室カテゴリ登録 Lambda ハンドラ"""
    logger.info("Received create category request")

    request = CategoryRequest.model_validate_json(event.body or "{}")
    category = service.create(name=request.category, status=request.status.value)

    logger.info("Room category created", extra={"category_id": str(category.id)})
    body = CategoryResponse(category=CategoryData.from_entity(category))
    return api_response(201, body.to_body())
