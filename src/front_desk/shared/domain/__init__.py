from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .service import (
    PriceBreakdown as PriceBreakdown,
)
from .service import (
    calculate_price as calculate_price,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    GuestDetails as GuestDetails,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    StayPeriod as StayPeriod,
)
