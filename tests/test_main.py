import phone_verify.main as main
from phone_verify.core.database import MongoDB


def test_root_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Phone verification service running"


def test_unknown_route_uses_error_envelope(client):
    response = client.post("/does-not-exist", json={})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_lifespan_keeps_store_handle_on_app_state(client):
    assert isinstance(main.app.state.mongodb, MongoDB)
