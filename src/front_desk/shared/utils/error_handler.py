import functools
from typing import Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from front_desk.shared.domain.exception import DomainException

from .http_response import error_response

Handler = Callable[..., dict]


def api_error_handler(logger: Logger) -> Callable[[Handler], Handler]:
    """ドメイン例外を HTTP ステータスに変換するデコレータ

    想定外の例外はログに残して 500 を返す。
    """

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        def wrapper(event, context) -> dict:
            try:
                return handler(event, context)
            except ValidationError as e:
                logger.info("Request validation failed", extra={"errors": str(e)})
                return error_response(
                    400,
                    "Invalid request",
                    errors=[
                        {"field": ".".join(map(str, err["loc"])), "message": err["msg"]}
                        for err in e.errors()
                    ],
                )
            except ValueError as e:
                logger.info("Invalid request value", extra={"error": str(e)})
                return error_response(400, str(e))
            except DomainException as e:
                if e.http_status == 409:
                    logger.warning(
                        "Request conflicts with current state", extra={"error": str(e)}
                    )
                return error_response(e.http_status, str(e))
            except Exception:
                logger.exception("Unhandled error")
                return error_response(500, "Internal server error")

        return wrapper

    return decorator
