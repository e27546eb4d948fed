from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.reservation.domain import ReservationStatus
from front_desk.reservation.handlers.response_models import (
    ReservationData,
    ReservationListResponse,
)
from front_desk.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, query_parameter

logger = Logger()

repository = DynamoDBReservationRepository()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """仮予約一覧取得 Lambda ハンドラ（?status= で絞り込み）"""
    status = query_parameter(event, "status")
    logger.info("Listing reservations", extra={"status": status})

    reservations = repository.find_all()
    if status is not None:
        wanted = ReservationStatus(status)
        reservations = [r for r in reservations if r.status == wanted]

    body = ReservationListResponse(
        reservations=[ReservationData.from_entity(r) for r in reservations],
        total_count=len(reservations),
    )
    return api_response(200, body.to_body())
