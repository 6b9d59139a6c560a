import pytest

from foodchain import create_app
from foodchain.extensions import db
from foodchain.models.food import Food
from foodchain.utils.auth import create_token


@pytest.fixture(scope="module")
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()

        def add_food(id, name, category, allergens, is_safe, user_id="user-1", household_id=None, is_try_bite=False):
            db.session.add(Food(
                id=id, name=name, category=category, allergens=allergens,
                is_safe=is_safe, is_try_bite=is_try_bite, user_id=user_id, household_id=household_id
            ))

        # user-1, personal scope
        add_food("apple", "Apple", "fruit", [], True)
        add_food("green-apple", "Green Apple", "fruit", [], True)
        add_food("banana", "Banana", "fruit", [], True)
        add_food("apple-sauce", "Apple Sauce", "fruit", ["sulfites", "citrus"], False, is_try_bite=True)
        add_food("cheese", "Cheddar Cheese", "dairy", ["milk"], True)
        add_food("nuggets", "Chicken Nuggets", "protein", ["wheat", "egg"], False)

        # another user, never visible to user-1
        add_food("other-apple", "Apple", "fruit", [], True, user_id="user-2")

        # shared household scope
        add_food("house-apple", "Apple", "fruit", [], True, user_id="user-3", household_id="house-1")
        add_food("house-pear", "Pear", "fruit", [], True, user_id="user-4", household_id="house-1")

        db.session.commit()

    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


def auth_headers(app, user_id, household_id=None):
    with app.app_context():
        token = create_token(user_id, household_id)
    return {"Authorization": f"Bearer {token}"}


def test_requires_bearer_token(client):
    r = client.post("/api/food-similarity", json={"food_id": "apple"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "UNAUTHORIZED"


def test_rejects_invalid_token(client):
    r = client.post("/api/food-similarity", json={"food_id": "apple"},
                    headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_missing_food_id_is_validation_error(client, app):
    r = client.post("/api/food-similarity", json={}, headers=auth_headers(app, "user-1"))
    assert r.status_code == 400
    body = r.get_json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert "food_id" in body["details"]


def test_unknown_food_is_not_found(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "nope"}, headers=auth_headers(app, "user-1"))
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"


def test_food_outside_owner_scope_is_not_found(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "other-apple"}, headers=auth_headers(app, "user-1"))
    assert r.status_code == 404


def test_ranked_similar_foods(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "apple"}, headers=auth_headers(app, "user-1"))
    assert r.status_code == 200, r.data
    data = r.get_json()

    assert data["food_id"] == "apple"
    assert data["source_food"] == {"id": "apple", "name": "Apple", "category": "fruit"}

    results = data["similar_foods"]
    assert [(s["id"], s["similarity_score"]) for s in results] == [
        ("green-apple", 0.9),
        ("banana", 0.8),
        ("apple-sauce", 0.5),
    ]
    assert results[0]["reasons"] == [
        "Both are fruit",
        "Neither has known allergens",
        "Both are safe foods",
        "Similar name: apple",
    ]
    assert results[0]["is_try_bite"] is False
    assert results[0]["allergens"] == []
    assert results[2]["is_try_bite"] is True
    assert results[2]["allergens"] == ["citrus", "sulfites"]


def test_similar_foods_stay_in_scope(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "apple"}, headers=auth_headers(app, "user-1"))
    ids = {s["id"] for s in r.get_json()["similar_foods"]}
    assert "apple" not in ids
    assert not ids & {"other-apple", "house-apple", "house-pear"}


def test_no_candidates_above_threshold_is_empty_success(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "nuggets"}, headers=auth_headers(app, "user-1"))
    assert r.status_code == 200
    assert r.get_json()["similar_foods"] == []


def test_household_scope_shares_foods_across_members(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "house-apple"},
                    headers=auth_headers(app, "user-4", household_id="house-1"))
    assert r.status_code == 200
    assert [s["id"] for s in r.get_json()["similar_foods"]] == ["house-pear"]


def test_household_food_hidden_from_personal_scope(client, app):
    r = client.post("/api/food-similarity", json={"food_id": "house-apple"}, headers=auth_headers(app, "user-3"))
    assert r.status_code == 404


def test_health_check(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"
