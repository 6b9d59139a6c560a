"""
Food Service

Owner-scoped access to stored foods:
- Scope filtering by household or user
- Source lookup and candidate listing for similarity ranking
- Food CRUD operations
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import and_

from foodchain.extensions import db
from foodchain.models.food import Food
from foodchain.services.similarity_constants import MAX_CANDIDATE_FOODS
from foodchain.services.similarity_service import FoodRecord

logger = logging.getLogger(__name__)


def owner_filter(user_id: str, household_id: Optional[str] = None):
    """SQLAlchemy criterion matching the foods visible to an owner scope."""
    if household_id:
        return Food.household_id == household_id
    return and_(Food.user_id == user_id, Food.household_id.is_(None))


def normalize_allergens(allergens: Optional[Iterable[str]]) -> List[str]:
    """Strip allergen tags, dropping empties and repeats while keeping order."""
    seen = []
    for allergen in allergens or []:
        tag = (allergen or "").strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


def to_record(food: Food) -> FoodRecord:
    return FoodRecord(
        id=food.id,
        name=food.name,
        is_safe=bool(food.is_safe),
        category=food.category or None,
        allergens=frozenset(food.allergens or []),
        owner_id=food.owner_id,
        is_try_bite=bool(food.is_try_bite),
    )


def serialize_food(food: Food) -> Dict[str, Any]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "allergens": list(food.allergens or []),
        "is_safe": food.is_safe,
        "is_try_bite": food.is_try_bite,
        "household_id": food.household_id,
        "created_at": food.created_at.isoformat() if food.created_at else None,
        "updated_at": food.updated_at.isoformat() if food.updated_at else None,
    }


def get_food(food_id: str, user_id: str, household_id: Optional[str] = None) -> Optional[Food]:
    return Food.query.filter(
        Food.id == food_id,
        owner_filter(user_id, household_id)
    ).first()


def list_candidate_foods(
    user_id: str,
    household_id: Optional[str],
    exclude_id: str,
    limit: int = MAX_CANDIDATE_FOODS
) -> List[FoodRecord]:
    """
    Fetch the candidate pool for similarity ranking.

    Args:
        user_id: Caller user ID
        household_id: Caller household ID, if any
        exclude_id: Source food ID, never returned
        limit: Maximum number of candidates

    Returns:
        Food records from the same owner scope, ordered by name
    """
    foods = (
        Food.query
        .filter(owner_filter(user_id, household_id), Food.id != exclude_id)
        .order_by(Food.name, Food.id)
        .limit(limit)
        .all()
    )
    return [to_record(food) for food in foods]


def list_foods(
    user_id: str,
    household_id: Optional[str] = None,
    page: int = 1,
    limit: int = 20,
    search: Optional[str] = None,
    category: Optional[str] = None,
    is_safe: Optional[bool] = None
) -> Dict[str, Any]:
    """
    List foods in the caller's scope with search, filter and pagination.

    Returns:
        Dictionary with items and pagination info
    """
    query = Food.query.filter(owner_filter(user_id, household_id))

    if search:
        query = query.filter(Food.name.ilike(f"%{search}%"))

    if category:
        query = query.filter(Food.category == category)

    if is_safe is not None:
        query = query.filter(Food.is_safe == is_safe)

    query = query.order_by(Food.name, Food.id)

    pagination = query.paginate(page=page, per_page=limit, error_out=False)

    return {
        "items": [serialize_food(food) for food in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages
    }


def create_food(data: Dict[str, Any], user_id: str, household_id: Optional[str] = None) -> Food:
    food = Food(
        name=data["name"].strip(),
        category=data.get("category") or None,
        allergens=normalize_allergens(data.get("allergens")),
        is_safe=data.get("is_safe", True),
        is_try_bite=data.get("is_try_bite", False),
        user_id=user_id,
        household_id=household_id,
    )
    db.session.add(food)
    db.session.commit()
    logger.info(f"Created food {food.id} for owner {food.owner_id}")
    return food


def update_food(food: Food, data: Dict[str, Any]) -> Food:
    if "name" in data:
        food.name = data["name"].strip()
    if "category" in data:
        food.category = data["category"] or None
    if "allergens" in data:
        food.allergens = normalize_allergens(data["allergens"])
    if "is_safe" in data:
        food.is_safe = data["is_safe"]
    if "is_try_bite" in data:
        food.is_try_bite = data["is_try_bite"]

    db.session.commit()
    logger.info(f"Updated food {food.id}")
    return food


def delete_food(food: Food) -> None:
    food_id = food.id
    db.session.delete(food)
    db.session.commit()
    logger.info(f"Deleted food {food_id}")
