from .booking_lifecycle import BookingLifecycle as BookingLifecycle
