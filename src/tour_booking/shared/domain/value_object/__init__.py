from .currency import Currency as Currency
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .trip_id import TripId as TripId
