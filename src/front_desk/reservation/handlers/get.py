from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.reservation.domain import ReservationId
from front_desk.reservation.handlers.response_models import (
    ReservationData,
    ReservationResponse,
)
from front_desk.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from front_desk.shared.domain.exception import ResourceNotFoundException
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

repository = DynamoDBReservationRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """仮予約取得 Lambda ハンドラ"""
    reservation_id = ReservationId(path_parameter(event, "reservation_id"))

    reservation = repository.find_by_id(reservation_id)
    if reservation is None:
        raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")

    return api_response(
        200,
        ReservationResponse(
            reservation=ReservationData.from_entity(reservation)
        ).to_body(),
    )
