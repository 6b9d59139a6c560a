from .home_routes import home_bp
from .food_routes import food_bp
from .similarity_routes import similarity_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(similarity_bp)
