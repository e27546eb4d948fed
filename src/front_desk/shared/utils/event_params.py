from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    """必須のパスパラメータを取り出す"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValueError(f"{name} is required")
    return value


def query_parameter(event: APIGatewayProxyEvent, name: str) -> str | None:
    value = (event.query_string_parameters or {}).get(name)
    return value or None
