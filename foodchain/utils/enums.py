from enum import Enum

class FoodCategory(str, Enum):
    PROTEIN = "protein"
    CARB = "carb"
    DAIRY = "dairy"
    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    SNACK = "snack"
