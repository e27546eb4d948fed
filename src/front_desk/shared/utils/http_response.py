import json
import os


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": os.getenv("CORS_ALLOW_ORIGIN", "*"),
        },
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, **extra: object) -> dict:
    """失敗レスポンスを生成する"""
    return api_response(status_code, {"success": False, "message": message, **extra})
