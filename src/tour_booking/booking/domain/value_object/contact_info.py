from dataclasses import dataclass


@dataclass(frozen=True)
class ContactInfo:
    """予約の連絡先"""

    name: str
    email: str
    phone: str
    address: str | None = None
