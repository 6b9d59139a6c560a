from foodchain import create_app
from foodchain.extensions import db
from foodchain.models.food import Food
from foodchain.utils.auth import create_token

DEMO_USER_ID = "demo-user"

DEMO_FOODS = [
    # name, category, allergens, is_safe, is_try_bite
    ("Apple", "fruit", [], True, False),
    ("Green Apple", "fruit", [], True, False),
    ("Apple Sauce", "fruit", [], False, True),
    ("Banana", "fruit", [], True, False),
    ("Chicken Nuggets", "protein", ["wheat", "egg"], True, False),
    ("Grilled Chicken", "protein", [], False, True),
    ("Peanut Butter Toast", "carb", ["peanuts", "wheat"], True, False),
    ("Plain Toast", "carb", ["wheat"], True, False),
    ("Cheddar Cheese", "dairy", ["milk"], True, False),
    ("String Cheese", "dairy", ["milk"], False, True),
    ("Steamed Carrots", "vegetable", [], False, True),
    ("Goldfish Crackers", "snack", ["wheat", "milk"], True, False),
]

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    for name, category, allergens, is_safe, is_try_bite in DEMO_FOODS:
        if not Food.query.filter_by(user_id=DEMO_USER_ID, name=name).first():
            db.session.add(Food(
                name=name, category=category, allergens=allergens,
                is_safe=is_safe, is_try_bite=is_try_bite, user_id=DEMO_USER_ID
            ))
            print(f"Added: {name}")

    db.session.commit()
    print("Seed complete.")
    print(f"Bearer token for {DEMO_USER_ID}: {create_token(DEMO_USER_ID)}")
