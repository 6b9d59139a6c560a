from flask import Blueprint
from foodchain.utils.auth import require_auth
from foodchain.controllers.food_controller import (
    list_foods_handler,
    create_food_handler,
    get_food_handler,
    update_food_handler,
    delete_food_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/api/foods")

@food_bp.route("", methods=["GET"])
@require_auth
def list_foods():
    return list_foods_handler()

@food_bp.route("", methods=["POST"])
@require_auth
def create():
    return create_food_handler()

@food_bp.route("/<food_id>", methods=["GET"])
@require_auth
def detail(food_id):
    return get_food_handler(food_id)

@food_bp.route("/<food_id>", methods=["PUT"])
@require_auth
def update(food_id):
    return update_food_handler(food_id)

@food_bp.route("/<food_id>", methods=["DELETE"])
@require_auth
def delete(food_id):
    return delete_food_handler(food_id)
