# tests/test_api/test_routes.py
import uuid
import pytest
from fastapi.testclient import TestClient

from api.auth import create_access_token
from api.main import app
from core.sa.database import get_db

@pytest.fixture
def client(database):
    """TestClient bound to the test database; startup hooks are not run."""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

def auth(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}

@pytest.fixture
def book_id(client):
    response = client.post("/api/books", json={"title": "Les Misérables", "author": "Victor Hugo"})
    return response.json()["id"]

@pytest.fixture
def place_id(client):
    response = client.post("/api/places", json={"name": "Notre-Dame", "lat": 48.853, "lng": 2.3499})
    return response.json()["id"]

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["lists"] == "/api/lists"

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}

def test_create_and_search_books(client):
    response = client.post("/api/books", json={
        "title": "L'Étranger", "author": "Albert Camus", "isbn": "9782070360024"
    })
    assert response.status_code == 201
    assert response.json()["isbn"] == "9782070360024"

    response = client.get("/api/books", params={"query": "camus"})
    assert response.status_code == 200
    assert [b["title"] for b in response.json()["items"]] == ["L'Étranger"]

def test_create_book_duplicate_isbn(client):
    payload = {"title": "La Peste", "author": "Albert Camus", "isbn": "9782070360420"}
    assert client.post("/api/books", json=payload).status_code == 201
    response = client.post("/api/books", json=payload)
    assert response.status_code == 409
    assert "9782070360420" in response.json()["error"]

def test_create_book_validation(client):
    response = client.post("/api/books", json={"title": "", "author": "Nobody"})
    assert response.status_code == 422

def test_places_near(client):
    for name, lat, lng in [
        ("Notre-Dame", 48.8530, 2.3499),
        ("Louvre", 48.8606, 2.3376),
        ("Jardin du Luxembourg", 48.8462, 2.3372),
        ("Sacré-Cœur", 48.8867, 2.3431),
        ("Versailles", 48.8049, 2.1204),
    ]:
        assert client.post("/api/places", json={"name": name, "lat": lat, "lng": lng}).status_code == 201

    response = client.get("/api/places/near", params={"lat": 48.85, "lng": 2.35, "radius": 2000})
    assert response.status_code == 200
    names = {p["name"] for p in response.json()["items"]}
    assert names == {"Notre-Dame", "Louvre", "Jardin du Luxembourg"}

def test_places_near_requires_coordinates(client):
    assert client.get("/api/places/near", params={"lat": 48.85}).status_code == 422
    assert client.get("/api/places/near", params={"lat": "abc", "lng": 2.35}).status_code == 422

def test_create_place_out_of_range(client):
    response = client.post("/api/places", json={"name": "Nowhere", "lat": 95, "lng": 0})
    assert response.status_code == 422

def test_get_book_and_place_by_id(client, book_id, place_id):
    response = client.get(f"/api/books/{book_id}")
    assert response.status_code == 200
    assert response.json()["author"] == "Victor Hugo"

    response = client.get(f"/api/places/{place_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Notre-Dame"

def test_get_book_and_place_not_found(client):
    response = client.get("/api/books/missing")
    assert response.status_code == 404
    assert "error" in response.json()
    assert client.get("/api/places/missing").status_code == 404

def test_list_lifecycle(client, book_id, place_id):
    response = client.post("/api/lists", json={"name": "Paris trip"}, headers=auth("u1"))
    assert response.status_code == 201
    created = response.json()
    assert created["visibility"] == "PRIVATE"
    assert created["owner_id"] == "u1"
    list_id = created["id"]

    response = client.post(f"/api/lists/{list_id}/items", json={
        "bookId": book_id, "placeId": place_id, "note": "great read"
    })
    assert response.status_code == 201
    item_id = response.json()["id"]

    detail = client.get(f"/api/lists/{list_id}").json()
    assert len(detail["items"]) == 1
    assert detail["items"][0]["book"]["author"] == "Victor Hugo"
    assert detail["items"][0]["place"]["name"] == "Notre-Dame"
    assert detail["items"][0]["note"] == "great read"

    response = client.delete(f"/api/lists/{list_id}/items/{item_id}")
    assert response.status_code == 204
    assert client.get(f"/api/lists/{list_id}").json()["items"] == []

    assert client.delete(f"/api/lists/{list_id}").status_code == 204
    response = client.get(f"/api/lists/{list_id}")
    assert response.status_code == 404
    assert "error" in response.json()

def test_lists_visibility(client):
    client.post("/api/lists", json={"name": "Private u1"}, headers=auth("u1"))
    client.post("/api/lists", json={"name": "Public u1", "visibility": "PUBLIC"}, headers=auth("u1"))
    client.post("/api/lists", json={"name": "Private u2"}, headers=auth("u2"))

    anonymous = {l["name"] for l in client.get("/api/lists").json()["items"]}
    assert anonymous == {"Public u1"}

    names = [l["name"] for l in client.get("/api/lists", headers=auth("u1")).json()["items"]]
    assert sorted(names) == ["Private u1", "Public u1"]

def test_invalid_token_is_anonymous(client):
    client.post("/api/lists", json={"name": "Private u1"}, headers=auth("u1"))
    forged = create_access_token("u1", secret="not-the-secret")
    response = client.get("/api/lists", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 200
    assert response.json()["items"] == []

def test_unknown_list_is_404(client):
    assert client.get(f"/api/lists/{uuid.uuid4()}").status_code == 404
    assert client.delete(f"/api/lists/{uuid.uuid4()}").status_code == 404

def test_malformed_list_id_is_422(client):
    assert client.get("/api/lists/not-a-uuid").status_code == 422

def test_attach_item_unknown_references(client, book_id):
    list_id = client.post("/api/lists", json={"name": "Trip"}).json()["id"]
    response = client.post(f"/api/lists/{list_id}/items", json={
        "book_id": book_id, "place_id": str(uuid.uuid4())
    })
    assert response.status_code == 404

def test_detach_item_from_other_list(client, book_id, place_id):
    first = client.post("/api/lists", json={"name": "First"}).json()["id"]
    second = client.post("/api/lists", json={"name": "Second"}).json()["id"]
    item_id = client.post(f"/api/lists/{second}/items", json={
        "book_id": book_id, "place_id": place_id
    }).json()["id"]

    assert client.delete(f"/api/lists/{first}/items/{item_id}").status_code == 404
    assert len(client.get(f"/api/lists/{second}").json()["items"]) == 1
