import pytest

from cookbook.service import DESCRIPTION_AND_IMAGE_REQUIRED, TITLE_REQUIRED

SOUP = {"title": "Soup", "text": "Boil it", "imageUrl": "https://x/y.png"}


def test_health_reports_ok(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_list_is_empty_initially(client):
    response = client.get("/api/messages")

    assert response.status_code == 200
    assert response.get_json() == []


def test_created_entry_is_last_in_list(client):
    response = client.post("/api/messages", json=SOUP)

    assert response.status_code == 201
    created = response.get_json()
    assert created["title"] == "Soup"
    assert created["text"] == "Boil it"
    assert created["imageUrl"] == "https://x/y.png"
    assert created["_id"]
    assert created["createdAt"]
    assert created["updatedAt"]

    listed = client.get("/api/messages").get_json()
    assert listed[-1] == created


def test_list_preserves_insertion_order(client):
    titles = ["Bread", "Jam", "Tea"]
    for title in titles:
        client.post("/api/messages", json={**SOUP, "title": title})

    listed = client.get("/api/messages").get_json()
    assert [entry["title"] for entry in listed] == titles


def test_create_trims_fields(client, storage):
    response = client.post(
        "/api/messages",
        json={"title": "  Stew ", "text": "\tSimmer\n", "imageUrl": " https://x/stew.png "},
    )

    assert response.status_code == 201
    body = response.get_json()
    assert (body["title"], body["text"], body["imageUrl"]) == (
        "Stew",
        "Simmer",
        "https://x/stew.png",
    )
    assert storage.list_entries()[0].title == "Stew"


@pytest.mark.parametrize(
    "payload",
    (
        {"title": "", "text": "Boil it", "imageUrl": "https://x/y.png"},
        {"title": "   ", "text": "Boil it", "imageUrl": "https://x/y.png"},
        {"title": "\n", "text": "", "imageUrl": ""},
        {"text": "Boil it"},
        {},
    ),
)
def test_create_requires_title(client, storage, payload):
    response = client.post("/api/messages", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {"error": TITLE_REQUIRED}
    assert storage.list_entries() == []


@pytest.mark.parametrize(
    "payload",
    (
        {"title": "Soup", "text": "Boil it", "imageUrl": ""},
        {"title": "Soup", "text": "Boil it"},
        {"title": "Soup", "text": "  ", "imageUrl": "https://x/y.png"},
        {"title": "Soup", "imageUrl": "https://x/y.png"},
    ),
)
def test_create_requires_text_and_image(client, storage, payload):
    response = client.post("/api/messages", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {"error": DESCRIPTION_AND_IMAGE_REQUIRED}
    assert storage.list_entries() == []


def test_create_without_json_body_is_rejected(client):
    response = client.post("/api/messages", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json() == {"error": TITLE_REQUIRED}


def test_create_forwards_store_failure_as_client_error(client, storage):
    storage.fail_writes = True

    response = client.post("/api/messages", json=SOUP)

    assert response.status_code == 400
    assert response.get_json() == {"error": "connection refused"}


def test_list_store_failure_is_server_error(client, storage):
    storage.fail_reads = True

    response = client.get("/api/messages")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to load messages"}


def test_delete_removes_entry(client):
    created = client.post("/api/messages", json=SOUP).get_json()
    kept = client.post("/api/messages", json={**SOUP, "title": "Salad"}).get_json()

    response = client.delete(f"/api/messages/{created['_id']}")

    assert response.status_code == 204
    assert response.data == b""
    assert client.get("/api/messages").get_json() == [kept]


def test_delete_missing_id_is_idempotent(client):
    response = client.delete("/api/messages/abcdefghij0123456789")

    assert response.status_code == 204


@pytest.mark.parametrize("entry_id", ("not-an-id", "short", "x" * 21, "abcdefghij012345678!"))
def test_delete_malformed_id_is_rejected(client, entry_id):
    response = client.delete(f"/api/messages/{entry_id}")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid id"}


def test_delete_store_failure_is_reported_as_invalid_id(client, storage):
    storage.fail_writes = True

    response = client.delete("/api/messages/abcdefghij0123456789")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid id"}


def test_unknown_api_route_serves_page(client):
    response = client.get("/api/nope")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert b"The Cook Book" in response.data


@pytest.mark.parametrize(
    "method,path",
    (
        ("put", "/api/messages"),
        ("patch", "/api/messages/abcdefghij0123456789"),
        ("delete", "/"),
    ),
)
def test_unsupported_method_serves_page(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert b"The Cook Book" in response.data
