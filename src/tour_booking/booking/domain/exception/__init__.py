from .exceptions import (
    InvalidCancellationException as InvalidCancellationException,
)
from .exceptions import (
    InvalidTransitionException as InvalidTransitionException,
)
from .exceptions import (
    PreconditionException as PreconditionException,
)
