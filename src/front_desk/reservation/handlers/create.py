from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.reservation.applications.create_reservation import (
    CreateReservationService,
)
from front_desk.reservation.domain import ReservationFactory
from front_desk.reservation.handlers.request_models import ReservationRequest
from front_desk.reservation.handlers.response_models import (
    ReservationData,
    ReservationResponse,
)
from front_desk.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from front_desk.room.domain import RoomId
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response

logger = Logger()

service = CreateReservationService(
    repository=DynamoDBReservationRepository(),
    room_repository=DynamoDBRoomRepository(),
    factory=ReservationFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """仮予約作成 Lambda ハンドラ"""
    logger.info("Received create reservation request")

    request = ReservationRequest.model_validate_json(event.body or "{}")
    reservation = service.create(
        request.to_details(),
        room_id=RoomId(request.room_id) if request.room_id else None,
    )

    logger.info("Reservation created", extra={"reservation_id": str(reservation.id)})
    return api_response(
        201,
        ReservationResponse(
            reservation=ReservationData.from_entity(reservation)
        ).to_body(),
    )
