from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.guest.domain import GrcNo
from front_desk.guest.handlers.response_models import GuestData, GuestResponse
from front_desk.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from front_desk.shared.domain.exception import ResourceNotFoundException
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

repository = DynamoDBGuestRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """GRC番号で宿泊者を取得する Lambda ハンドラ"""
    grc_no = GrcNo(path_parameter(event, "grc_no"))
    logger.info("Fetching guest", extra={"grc_no": str(grc_no)})

    guest = repository.find_by_id(grc_no)
    if guest is None:
        raise ResourceNotFoundException(f"Guest not found: {grc_no}")
    return api_response(200, GuestResponse(guest=GuestData.from_entity(guest)).to_body())
