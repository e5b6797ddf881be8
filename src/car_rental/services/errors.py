"""Custom service layer errors."""


class ServiceError(Exception):
    """Base error for service-layer failures."""

    code = "service_error"
    default_message = "The operation could not be completed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when a business rule validation fails."""

    code = "validation_error"
    default_message = "Invalid input."


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""

    code = "not_found"
    default_message = "Record not found."


class InvalidCustomerName(ValidationError):
    code = "invalid_customer_name"
    default_message = "Please enter a customer name."


class MissingVehicleId(ValidationError):
    code = "missing_vehicle_id"
    default_message = "Please enter a car ID."


class InvalidDayCount(ValidationError):
    """Raised for non-numeric or non-positive rental day counts."""

    code = "invalid_day_count"
    NOT_A_NUMBER = "not_a_number"
    NOT_POSITIVE = "not_positive"

    _MESSAGES = {
        NOT_A_NUMBER: "Please enter a valid number for rental days.",
        NOT_POSITIVE: "Rental days must be positive.",
    }

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or self._MESSAGES.get(reason))


class DuplicateVehicleId(ValidationError):
    code = "duplicate_vehicle_id"

    def __init__(self, vehicle_id: str) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} is already in the catalog.")


class VehicleUnavailable(NotFoundError):
    """Raised when a vehicle is unknown or already rented."""

    code = "vehicle_unavailable"
    default_message = "Invalid car selection or car not available for rent."


class VehicleNotRented(NotFoundError):
    """Raised when a returned vehicle is unknown or not currently rented."""

    code = "vehicle_not_rented"
    default_message = "Invalid car ID or car is not rented."
