import mongomock
import pytest
from fastapi.testclient import TestClient

from stayvista.config import TOKEN_COOKIE_NAME
from stayvista.database.init import Store
from stayvista.main import create_app
from stayvista.services.payment_service import PaymentService
from stayvista.utils.dependencies import create_access_token


class FakePaymentService(PaymentService):
    def __init__(self, fail: bool = False):
        super().__init__(api_key="sk_test_fake")
        self.fail = fail
        self.amounts = []

    def create_payment_intent(self, amount: int) -> str:
        if self.fail:
            raise RuntimeError("provider unavailable")
        self.amounts.append(amount)
        return f"pi_{amount}_secret_test"


@pytest.fixture
def store():
    return Store(mongomock.MongoClient()["stayVista-test"])


@pytest.fixture
def payment_service():
    return FakePaymentService()


@pytest.fixture
def client(store, payment_service):
    return TestClient(create_app(store=store, payment_service=payment_service))


@pytest.fixture
def auth_client(client):
    token = create_access_token({"email": "guest@example.com", "name": "Guest"})
    client.cookies.set(TOKEN_COOKIE_NAME, token)
    return client
