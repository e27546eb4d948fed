from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.guest.applications.search_guests import (
    DEFAULT_LIMIT,
    SearchGuestsService,
)
from front_desk.guest.handlers.response_models import GuestData, GuestListResponse
from front_desk.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, query_parameter

logger = Logger()

service = SearchGuestsService(repository=DynamoDBGuestRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """宿泊者一覧 Lambda ハンドラ（?name=&phone=&page=&limit=）"""
    page = int(query_parameter(event, "page") or 1)
    limit = int(query_parameter(event, "limit") or DEFAULT_LIMIT)
    logger.info("Searching guests", extra={"page": page, "limit": limit})

    result = service.search(
        name=query_parameter(event, "name"),
        phone=query_parameter(event, "phone"),
        page=page,
        limit=limit,
    )

    body = GuestListResponse(
        guests=[GuestData.from_entity(g) for g in result.guests],
        total=result.total,
        page=result.page,
        pages=result.pages,
    )
    return api_response(200, body.to_body())
