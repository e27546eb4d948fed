from .dynamodb import get_table, query_all

__all__ = ["get_table", "query_all"]
