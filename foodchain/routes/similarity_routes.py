from flask import Blueprint
from foodchain.utils.auth import require_auth
from foodchain.controllers.similarity_controller import similarity_handler

similarity_bp = Blueprint("similarity", __name__, url_prefix="/api")

@similarity_bp.post("/food-similarity")
@require_auth
def food_similarity():
    return similarity_handler()
