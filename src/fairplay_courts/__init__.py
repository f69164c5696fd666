"""Court availability and booking-link resolution for Centre FairPlay."""

__version__ = "0.1.0"
