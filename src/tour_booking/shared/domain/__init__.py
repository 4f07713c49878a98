from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    TripId as TripId,
)
