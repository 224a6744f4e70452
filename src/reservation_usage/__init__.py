"""Reserved instance usage per EC2 instance family."""

__version__ = "0.4.0"
