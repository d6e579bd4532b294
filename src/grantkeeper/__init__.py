"""grantkeeper - object permission kernel for owned, shareable entities."""

__version__ = "0.1.0"
