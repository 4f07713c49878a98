from .booking_cancel_info import BookingCancelInfo as BookingCancelInfo
from .booking_id import BookingId as BookingId
from .contact_info import ContactInfo as ContactInfo
from .customer_id import CustomerId as CustomerId
from .customer_info import CustomerInfo as CustomerInfo
from .trip import Trip as Trip
