"""School records service - students, parents, registrations and payment types"""

__version__ = "1.0.0"
