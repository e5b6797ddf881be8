"""Version metadata for CarRental."""

__app_name__ = "CarRental"
__version__ = "1.0.0"
__company__ = "Car Rental System"
