# backoffice/models/customer.py

from backoffice.models.base import Row


class Customer(Row):
    name: str
    email: str
    phone: str
    address: str
