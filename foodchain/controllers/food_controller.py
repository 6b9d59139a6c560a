"""
Food Controller Module

Handles owner-scoped food (pantry) endpoints:
- Listing with search, filters and pagination
- Create, detail, update and delete
"""

from flask import request, current_app
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from foodchain.extensions import db
from foodchain.schemas.food_schema import CreateFoodSchema, UpdateFoodSchema, FoodQuerySchema
from foodchain.services.food_service import (
    list_foods,
    get_food,
    create_food,
    update_food,
    delete_food,
    serialize_food,
)
from foodchain.utils.http import ok, error, json_body


def list_foods_handler():
    """
    List foods in the caller's scope.

    Query Parameters:
        - page: Page number (default: 1)
        - limit: Items per page (default: 20)
        - search: Search term for the food name
        - category: Category filter
        - is_safe: Safety status filter
    """
    try:
        params = FoodQuerySchema().load(request.args.to_dict())
    except ValidationError as err:
        return error("VALIDATION_ERROR", "Invalid query parameters", 400, details=err.messages)

    result = list_foods(
        request.user_id,
        request.household_id,
        page=params["page"],
        limit=params["limit"],
        search=(params["search"] or "").strip() or None,
        category=params["category"] or None,
        is_safe=params["is_safe"],
    )
    return ok(result)


def create_food_handler():
    try:
        data = CreateFoodSchema().load(json_body())
    except ValidationError as err:
        return error("VALIDATION_ERROR", "Invalid request body", 400, details=err.messages)

    try:
        food = create_food(data, request.user_id, request.household_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to create food: {e}")
        return error("UNKNOWN_ERROR", "Failed to create food", 500)

    return ok(serialize_food(food), 201)


def get_food_handler(food_id: str):
    food = get_food(food_id, request.user_id, request.household_id)
    if not food:
        return error("NOT_FOUND", "Food not found", 404)
    return ok(serialize_food(food))


def update_food_handler(food_id: str):
    food = get_food(food_id, request.user_id, request.household_id)
    if not food:
        return error("NOT_FOUND", "Food not found", 404)

    try:
        data = UpdateFoodSchema().load(json_body())
    except ValidationError as err:
        return error("VALIDATION_ERROR", "Invalid request body", 400, details=err.messages)

    try:
        food = update_food(food, data)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to update food {food_id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to update food", 500)

    return ok(serialize_food(food))


def delete_food_handler(food_id: str):
    food = get_food(food_id, request.user_id, request.household_id)
    if not food:
        return error("NOT_FOUND", "Food not found", 404)

    try:
        delete_food(food)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to delete food {food_id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to delete food", 500)

    return ok({"message": "Food deleted"})
