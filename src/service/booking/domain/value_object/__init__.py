from src.service.booking.domain.value_object.flight_time import FlightTime

__all__ = ['FlightTime']
