import pytest

from foodchain import create_app
from foodchain.extensions import db
from foodchain.models.food import Food
from foodchain.services.food_service import list_candidate_foods
from foodchain.services.similarity_service import FoodRecord


POOL_SIZE = 205


@pytest.fixture(scope="module")
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()

        for i in range(POOL_SIZE):
            db.session.add(Food(id=f"food-{i:03d}", name=f"Food {i:03d}", category="snack",
                                allergens=[], is_safe=True, user_id="pool-user"))
        # same name as food-050, ordered by id after it
        db.session.add(Food(id="food-050-b", name="Food 050", category="snack",
                            allergens=[], is_safe=True, user_id="pool-user"))
        db.session.add(Food(id="food-050-a", name="Food 050", category="snack",
                            allergens=[], is_safe=True, user_id="pool-user"))

        db.session.add(Food(id="small-1", name="Banana", category="fruit", allergens=[],
                            is_safe=True, user_id="small-user"))
        db.session.add(Food(id="small-2", name="Apple", category="fruit", allergens=[],
                            is_safe=True, user_id="small-user"))
        db.session.add(Food(id="small-3", name="Cherry", category="fruit", allergens=[],
                            is_safe=True, user_id="small-user"))
        db.session.commit()
    yield app


def test_candidate_pool_is_capped_at_two_hundred(app):
    with app.app_context():
        pool = list_candidate_foods("pool-user", None, exclude_id="food-000")

    assert len(pool) == 200
    assert all(isinstance(record, FoodRecord) for record in pool)
    assert "food-000" not in [record.id for record in pool]


def test_candidate_pool_is_ordered_by_name_then_id(app):
    with app.app_context():
        pool = list_candidate_foods("pool-user", None, exclude_id="food-000")

    keys = [(record.name, record.id) for record in pool]
    assert keys == sorted(keys)
    ids = [record.id for record in pool]
    assert ids.index("food-050") < ids.index("food-050-a") < ids.index("food-050-b")


def test_candidate_pool_respects_smaller_limit(app):
    with app.app_context():
        pool = list_candidate_foods("pool-user", None, exclude_id="food-001", limit=5)

    assert [record.id for record in pool] == ["food-000", "food-002", "food-003", "food-004", "food-005"]


def test_candidate_pool_smaller_than_limit(app):
    with app.app_context():
        pool = list_candidate_foods("small-user", None, exclude_id="small-1", limit=10)

    assert [record.id for record in pool] == ["small-2", "small-3"]

