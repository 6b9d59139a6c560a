from marshmallow import Schema, fields, validate, EXCLUDE
from foodchain.utils.enums import FoodCategory

CATEGORY_VALUES = [e.value for e in FoodCategory]

# Rejects names made only of whitespace
NAME_VALIDATORS = [
    validate.Length(min=1, max=150),
    validate.Regexp(r"(?s).*\S", error="Name must not be blank."),
]

class CreateFoodSchema(Schema):
    name = fields.Str(required=True, validate=NAME_VALIDATORS)
    category = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf(CATEGORY_VALUES))
    allergens = fields.List(fields.Str(), allow_none=True, load_default=list)
    is_safe = fields.Bool(load_default=True)
    is_try_bite = fields.Bool(load_default=False)

class UpdateFoodSchema(Schema):
    name = fields.Str(validate=NAME_VALIDATORS)
    category = fields.Str(allow_none=True, validate=validate.OneOf(CATEGORY_VALUES))
    allergens = fields.List(fields.Str(), allow_none=True)
    is_safe = fields.Bool()
    is_try_bite = fields.Bool()

class FoodQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    limit = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    search = fields.Str(allow_none=True, load_default=None)
    category = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf(CATEGORY_VALUES + [""]))
    is_safe = fields.Bool(allow_none=True, load_default=None)

class SimilarityRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_id = fields.Str(required=True, validate=validate.Length(min=1))
