import mongomock
from fastapi.testclient import TestClient
from pymongo.errors import ConfigurationError, ServerSelectionTimeoutError

from stayvista import main
from stayvista.database.init import Store


def test_app_serves_when_client_cannot_be_created(monkeypatch, payment_service):
    def unresolvable(*args, **kwargs):
        raise ConfigurationError("The DNS query name does not exist")

    monkeypatch.setattr(main, "create_client", unresolvable)

    with TestClient(main.create_app(payment_service=payment_service)) as client:
        assert client.get("/").status_code == 200

        response = client.get("/users")
        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"


def test_app_serves_when_ping_fails(monkeypatch, payment_service):
    def unreachable(self):
        raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(main, "create_client", lambda: mongomock.MongoClient())
    monkeypatch.setattr(Store, "ping", unreachable)

    with TestClient(main.create_app(payment_service=payment_service)) as client:
        assert client.get("/").status_code == 200
        assert client.get("/rooms").json() == []


def test_startup_connects_store_when_none_given(monkeypatch, payment_service):
    pinged = []
    monkeypatch.setattr(main, "create_client", lambda: mongomock.MongoClient())
    monkeypatch.setattr(Store, "ping", lambda self: pinged.append(True))

    app = main.create_app(payment_service=payment_service)
    with TestClient(app):
        assert isinstance(app.state.store, Store)
        assert pinged == [True]
