import os

import boto3


def get_table(table_name: str | None = None):
    """TABLE_NAME 環境変数（または引数）の DynamoDB テーブルを返す"""
    dynamodb = boto3.resource("dynamodb")
    return dynamodb.Table(table_name or os.getenv("TABLE_NAME"))


def query_all(table, **kwargs) -> list[dict]:
    """LastEvaluatedKey を辿ってクエリ結果を全件取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
