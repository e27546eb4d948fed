class DomainException(Exception):
    """ドメイン層で発生する基底例外

    ``http_status`` は API ハンドラが返すステータスコード。
    """

    http_status = 500


class ResourceNotFoundException(DomainException):
    """客室・予約・宿泊者などが見つからない場合"""

    http_status = 404


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（予約済みの客室、不正なステータス遷移など）"""

    http_status = 409


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    http_status = 409


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（予約ステータスが期待値と異なる場合）"""

    http_status = 409
