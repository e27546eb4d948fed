from unittest.mock import MagicMock

from front_desk.shared.infrastructure import query_all


def test_query_all_follows_last_evaluated_key():
    table = MagicMock()
    table.query.side_effect = [
        {"Items": [{"PK": "A"}], "LastEvaluatedKey": {"PK": "A"}},
        {"Items": [{"PK": "B"}]},
    ]

    items = query_all(table, IndexName="GSI1")

    assert items == [{"PK": "A"}, {"PK": "B"}]
    assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {"PK": "A"}
