from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "customer"
    HALLOWNER = "hallowner"
    ADMIN = "admin"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
