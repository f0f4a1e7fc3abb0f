"""
End-to-end tests of the HTTP endpoints through the FastAPI test client.
"""

from string_analyzer import crud
from string_analyzer.models import FilterSpec
from string_analyzer.utils import compute_sha256


def create(client, value):
    return client.post("/strings", json={"value": value})


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_string(client):
    response = create(client, "  Racecar  ")
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == compute_sha256("Racecar")
    assert data["value"] == "Racecar"
    assert data["properties"] == {
        "length": 7,
        "is_palindrome": True,
        "unique_characters": 5,
        "word_count": 1,
        "sha256_hash": compute_sha256("Racecar"),
        "character_frequency_map": {"R": 1, "a": 2, "c": 2, "e": 1, "r": 1},
    }
    assert "created_at" in data


def test_create_duplicate_conflicts(client, store):
    assert create(client, "abc").status_code == 201
    response = create(client, " abc ")
    assert response.status_code == 409
    assert response.json() == {"error": "String already exists in the system"}
    assert len(store) == 1


def test_create_missing_value(client):
    response = client.post("/strings", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"


def test_create_blank_value(client):
    assert create(client, "   ").status_code == 400


def test_create_non_string_value(client):
    response = client.post("/strings", json={"value": 123})
    assert response.status_code == 422
    assert response.json()["error"] == "Value must be a string"


def test_get_string(client):
    create(client, "hello world")
    response = client.get("/strings/hello world")
    assert response.status_code == 200
    assert response.json()["properties"]["word_count"] == 2


def test_get_missing_string(client):
    response = client.get("/strings/nothing")
    assert response.status_code == 404
    assert response.json() == {"error": "String does not exist in the system"}


def test_delete_then_get(client):
    create(client, "abc")
    response = client.delete("/strings/abc")
    assert response.status_code == 204
    assert client.get("/strings/abc").status_code == 404
    assert client.delete("/strings/abc").status_code == 404


def test_list_without_filters(client):
    for value in ["a", "ab", "aba"]:
        create(client, value)
    response = client.get("/strings")
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 3
    assert body["filters_applied"] is None


def test_list_with_filters(client):
    for value in ["a", "ab", "aba"]:
        create(client, value)
    response = client.get("/strings", params={"min_length": 2, "is_palindrome": "true"})
    assert response.status_code == 200
    body = response.json()
    assert [item["value"] for item in body["data"]] == ["aba"]
    assert body["count"] == 1
    assert body["filters_applied"] == {"is_palindrome": True, "min_length": 2}


def test_list_contains_character(client):
    for value in ["zebra", "apple"]:
        create(client, value)
    response = client.get("/strings", params={"contains_character": "z"})
    assert [item["value"] for item in response.json()["data"]] == ["zebra"]


def test_list_rejects_conflicting_bounds(client):
    response = client.get("/strings", params={"min_length": 5, "max_length": 2})
    assert response.status_code == 400
    assert "min_length cannot be greater than max_length" in response.json()["details"]


def test_list_rejects_bad_parameters(client):
    assert client.get("/strings", params={"min_length": "abc"}).status_code == 400
    assert client.get("/strings", params={"min_length": -1}).status_code == 400
    assert client.get("/strings", params={"contains_character": "ab"}).status_code == 400


def test_natural_language_filter(client):
    for value in ["level", "hello world", "noon", "abc"]:
        create(client, value)
    response = client.get(
        "/strings/filter-by-natural-language",
        params={"query": "all single word palindromic strings"},
    )
    assert response.status_code == 200
    body = response.json()
    assert sorted(item["value"] for item in body["data"]) == ["level", "noon"]
    assert body["count"] == 2
    assert body["interpreted_query"] == {
        "original": "all single word palindromic strings",
        "parsed_filters": {"word_count": 1, "is_palindrome": True},
    }


def test_natural_language_untranslatable(client):
    response = client.get("/strings/filter-by-natural-language", params={"query": "gibberish"})
    assert response.status_code == 400
    assert response.json() == {"error": "Unable to parse natural language query"}


def test_natural_language_missing_query(client):
    assert client.get("/strings/filter-by-natural-language").status_code == 400


def test_root_lists_health(client):
    assert "GET /health" in client.get("/").json()["endpoints"]


def test_create_with_lone_surrogate(client):
    response = client.post(
        "/strings",
        content=b'{"value": "a\\ud800b"}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["value"] == "a\ufffdb"
    assert data["id"] == compute_sha256("a\ufffdb")


def test_natural_language_conflicting_filters(client, monkeypatch):
    monkeypatch.setattr(
        crud,
        "parse_natural_language_query",
        lambda text: FilterSpec.model_construct(min_length=5, max_length=2),
    )
    response = client.get("/strings/filter-by-natural-language", params={"query": "anything"})
    assert response.status_code == 422
    assert response.json()["error"] == "Query parsed but resulted in conflicting filters"
