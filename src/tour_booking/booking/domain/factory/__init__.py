from .booking_factory import BookingDetails as BookingDetails
from .booking_factory import BookingFactory as BookingFactory
from .booking_factory import BookingState as BookingState
from .booking_factory import TravelerDetails as TravelerDetails
