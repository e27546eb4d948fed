from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.handlers.response_models import (
    CategoryData,
    CategoryListResponse,
)
from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.shared.utils import api_error_handler, api_response

logger = Logger()

repository = DynamoDBRoomCategoryRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """客室カテゴリ一覧取得 Lambda ハンドラ"""
    logger.info("Listing room categories")

    categories = repository.find_all()
    body = CategoryListResponse(
        categories=[CategoryData.from_entity(c) for c in categories]
    )
    return api_response(200, body.to_body())
