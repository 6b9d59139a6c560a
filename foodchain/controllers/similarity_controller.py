"""
Similarity Controller

Handles the food similarity endpoint: resolves the source food and its
candidate pool inside the caller's owner scope, then ranks the pool.
"""

from flask import request, current_app
from marshmallow import ValidationError

from foodchain.schemas.food_schema import SimilarityRequestSchema
from foodchain.services.food_service import get_food, list_candidate_foods, to_record
from foodchain.services.similarity_service import rank_similar_foods
from foodchain.utils.http import ok, error, json_body


def similarity_handler():
    try:
        data = SimilarityRequestSchema().load(json_body())
    except ValidationError as err:
        return error("VALIDATION_ERROR", "Invalid request body", 400, details=err.messages)

    food_id = data["food_id"]
    user_id = request.user_id
    household_id = request.household_id

    food = get_food(food_id, user_id, household_id)
    if not food:
        return error("NOT_FOUND", "Food not found", 404)

    source = to_record(food)
    candidates = list_candidate_foods(user_id, household_id, exclude_id=source.id)
    results = rank_similar_foods(source, candidates)

    current_app.logger.info(
        f"Similarity for food {food_id}: {len(results)} of {len(candidates)} candidates returned"
    )

    return ok({
        "food_id": food_id,
        "source_food": {
            "id": source.id,
            "name": source.name,
            "category": source.category
        },
        "similar_foods": [result.to_dict() for result in results]
    })
