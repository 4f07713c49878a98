from .entity import Booking as Booking
from .enum import AgeGroup as AgeGroup
from .enum import BookingMostValued as BookingMostValued
from .enum import BookingStatus as BookingStatus
from .exception import InvalidCancellationException as InvalidCancellationException
from .exception import InvalidTransitionException as InvalidTransitionException
from .exception import PreconditionException as PreconditionException
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .factory import BookingState as BookingState
from .policy import BookingPolicy as BookingPolicy
from .policy import CancelTier as CancelTier
from .service import BookingLifecycle as BookingLifecycle
from .value_object import BookingCancelInfo as BookingCancelInfo
from .value_object import BookingId as BookingId
from .value_object import ContactInfo as ContactInfo
from .value_object import CustomerId as CustomerId
from .value_object import CustomerInfo as CustomerInfo
from .value_object import Trip as Trip
