"""
HTTP tests for the card endpoints and error handlers.
"""

import importlib
import logging
import warnings

from card_store_api.app.api.v1.endpoints import cards
from card_store_api.app.core.store import CardStore
from card_store_api.app.main import create_app

from fastapi.testclient import TestClient


SEED = [
    {"id": 1, "suit": "Hearts", "value": "Ace"},
    {"id": 2, "suit": "Spades", "value": "King"},
    {"id": 3, "suit": "Diamonds", "value": "10"},
]


# --- GET /cards ---

def test_list_cards(client):
    resp = client.get("/cards")
    assert resp.status_code == 200
    assert resp.json() == SEED


def test_get_card(client):
    resp = client.get("/cards/3")
    assert resp.status_code == 200
    assert resp.json() == {"id": 3, "suit": "Diamonds", "value": "10"}


def test_get_card_not_found(client):
    resp = client.get("/cards/99")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Card not found", "message": "No card found with ID 99"}


def test_get_card_with_non_integer_id(client):
    resp = client.get("/cards/abc")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Card not found", "message": "No card found with ID abc"}


def test_update_and_delete_with_non_integer_id(client):
    resp = client.put("/cards/1.5", json={"suit": "Clubs", "value": "7"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "No card found with ID 1.5"

    resp = client.delete("/cards/abc")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Card not found"
    assert len(client.get("/cards").json()) == 3


# --- POST /cards ---

def test_create_card(client):
    resp = client.post("/cards", json={"suit": "Clubs", "value": "7"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "suit": "Clubs", "value": "7"}
    assert client.get("/cards/4").json() == {"id": 4, "suit": "Clubs", "value": "7"}


def test_create_card_missing_field(client):
    resp = client.post("/cards", json={"suit": "Clubs"})
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Missing required fields",
        "message": "Both suit and value are required",
    }


def test_create_card_without_body(client):
    resp = client.post("/cards")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing required fields"


def test_create_card_invalid_value(client):
    resp = client.post("/cards", json={"suit": "Clubs", "value": "queen"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid value"
    assert len(client.get("/cards").json()) == 3


def test_create_card_with_non_object_body(client):
    resp = client.post("/cards", json=["Clubs", "7"])
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad Request"


def test_ids_not_reused_after_delete(client):
    client.delete("/cards/3")
    resp = client.post("/cards", json={"suit": "Hearts", "value": "5"})
    assert resp.json()["id"] == 4


# --- PUT /cards/{id} ---

def test_update_card(client):
    resp = client.put("/cards/1", json={"suit": "Spades", "value": "Queen"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "suit": "Spades", "value": "Queen"}


def test_update_card_invalid_suit(client):
    resp = client.put("/cards/1", json={"suit": "Bad", "value": "Ace"})
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Invalid suit",
        "message": "Suit must be one of: Hearts, Diamonds, Clubs, Spades",
    }
    assert client.get("/cards/1").json()["suit"] == "Hearts"


def test_update_card_not_found(client):
    resp = client.put("/cards/77", json={"suit": "Clubs", "value": "2"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "No card found with ID 77"


# --- DELETE /cards/{id} ---

def test_delete_card(client):
    resp = client.delete("/cards/2")
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Card with ID 2 removed",
        "card": {"id": 2, "suit": "Spades", "value": "King"},
    }
    assert client.get("/cards/2").status_code == 404


def test_delete_card_not_found(client):
    resp = client.delete("/cards/8")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Card not found"


# --- Filters ---

def test_filter_by_suit_is_case_insensitive(client):
    resp = client.get("/cards/suit/hearts")
    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, "suit": "Hearts", "value": "Ace"}]


def test_filter_by_value(client):
    client.post("/cards", json={"suit": "Clubs", "value": "King"})
    resp = client.get("/cards/value/KING")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == [2, 4]


def test_filter_miss_has_message_only(client):
    resp = client.get("/cards/suit/clubs")
    assert resp.status_code == 404
    assert resp.json() == {"message": "No cards found with suit clubs"}

    resp = client.get("/cards/value/Jack")
    assert resp.status_code == 404
    assert resp.json() == {"message": "No cards found with value Jack"}


# --- Catch-all and internal faults ---

def test_unknown_route(client):
    resp = client.get("/decks")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "message": "Route GET /decks not found"}


def test_unsupported_method_is_unknown_route(client):
    resp = client.patch("/cards/1", json={"suit": "Clubs"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Route PATCH /cards/1 not found"


def test_route_definitions_raise_no_deprecation_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(cards)
    assert [str(w.message) for w in caught if issubclass(w.category, DeprecationWarning)] == []


def test_head_mirrors_get_routes(client):
    assert client.head("/cards").status_code == 200
    assert client.head("/cards/1").status_code == 200
    assert client.head("/cards/suit/HEARTS").status_code == 200
    assert client.head("/cards/value/ace").status_code == 200
    assert client.head("/cards/99").status_code == 404
    assert client.head("/cards/suit/clubs").status_code == 404


def test_head_routes_stay_out_of_schema(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert set(paths["/cards"]) == {"get", "post"}
    assert set(paths["/cards/{card_id}"]) == {"get", "put", "delete"}


class ExplodingStore(CardStore):
    def all(self):
        raise RuntimeError("store exploded")


def test_internal_fault_is_generic():
    app = create_app(store=ExplodingStore())
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/cards")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error", "message": "Something went wrong"}
    assert "exploded" not in resp.text


def test_internal_fault_is_answered_inside_the_app(caplog):
    app = create_app(store=ExplodingStore())
    # With server exceptions re-raised, an escaping fault would fail here.
    with TestClient(app) as client:
        with caplog.at_level(logging.ERROR):
            resp = client.get("/cards")
    assert resp.status_code == 500
    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Unhandled error while serving GET /cards"
    assert errors[0].exc_info[0] is RuntimeError


def test_each_app_owns_its_store():
    first = create_app()
    second = create_app()
    assert first.state.card_store is not second.state.card_store


def test_store_cleared_on_shutdown(store):
    app = create_app(store=store)
    with TestClient(app):
        assert len(store) == 3
    assert len(store) == 0
