from stayvista.services.base_service import BaseService


class BookingService(BaseService):
    def __init__(self):
        super().__init__("bookings")
