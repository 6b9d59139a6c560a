from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from foodchain.extensions import db

def home_index():
    return jsonify({
        "message": "Foodchain similarity service is running",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        current_app.logger.warning(f"Database ping failed: {e}")
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
