"""
Input validation schemas using Pydantic. Records are checked here, at the
ingestion boundary, so the domain and logic layers can trust their fields.
"""
import datetime as dt
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from mealcart.utilities.constants import CATEGORIES, MAX_AMOUNT, MAX_QUANTITY_LENGTH, STOCK_STATUSES

Category = Literal["produce", "protein", "dairy", "pantry", "frozen", "bakery", "other"]
StockStatus = Literal["have", "low", "out"]


def _lower(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


class IngredientInput(BaseModel):
    """Schema for one recipe ingredient line."""
    item: str = Field(..., min_length=1, max_length=100)
    # Free-form on purpose ("1 1/2", "3/4", "2"); parsed when the list is built
    quantity: Union[str, float] = ""
    unit: str = Field("", max_length=30)
    category: Category = "other"

    @field_validator('item', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('item')
    @classmethod
    def validate_item(cls, v):
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        if isinstance(v, str) and len(v.strip()) > MAX_QUANTITY_LENGTH:
            raise ValueError(f'Quantity must be at most {MAX_QUANTITY_LENGTH} characters')
        return v

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        v = _lower(v)
        return v if v in CATEGORIES else 'other'


class RecipeInput(BaseModel):
    """Schema for recipe creation."""
    name: str = Field(..., min_length=1, max_length=200)
    servings: float = Field(..., gt=0, le=100)
    instructions: str = ""
    cook_time: Optional[int] = Field(None, ge=0, le=24 * 60)
    source: Optional[str] = Field(None, max_length=500)
    ingredients: List[IngredientInput] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()


class RecipeUpdateInput(BaseModel):
    """Partial recipe update; unset fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    servings: Optional[float] = Field(None, gt=0, le=100)
    instructions: Optional[str] = None
    cook_time: Optional[int] = Field(None, ge=0, le=24 * 60)
    source: Optional[str] = Field(None, max_length=500)


class IngredientListInput(BaseModel):
    ingredients: List[IngredientInput]


class InventoryItemInput(BaseModel):
    """Schema for an inventory record."""
    item: str = Field(..., min_length=1, max_length=100)
    status: StockStatus = "out"
    category: Category = "other"
    typical_price: Optional[float] = Field(None, ge=0, le=MAX_AMOUNT)

    @field_validator('item')
    @classmethod
    def strip_item(cls, v):
        if not v.strip():
            raise ValueError('Item name cannot be empty')
        return v.strip()

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        v = _lower(v)
        if v not in STOCK_STATUSES:
            raise ValueError(f"status must be one of {', '.join(STOCK_STATUSES)}")
        return v

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        v = _lower(v)
        return v if v in CATEGORIES else 'other'

    @field_validator('typical_price', mode='before')
    @classmethod
    def blank_price(cls, v):
        """An empty price means unknown, not free."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class MealAssignmentInput(BaseModel):
    """Schema for assigning a recipe to a day."""
    recipe_id: str = Field(..., min_length=1)


class ManualShoppingItemInput(BaseModel):
    """Schema for an item added to the list by hand."""
    item: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(0, ge=0, le=MAX_AMOUNT)
    unit: str = Field("", max_length=30)
    category: Category = "other"
    estimated_price: Optional[float] = Field(None, ge=0, le=MAX_AMOUNT)

    @field_validator('item', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        v = _lower(v)
        return v if v in CATEGORIES else 'other'


class ShoppingItemUpdateInput(BaseModel):
    """Checked flag update; omit 'checked' to toggle."""
    checked: Optional[bool] = None


class GenerateListInput(BaseModel):
    """Options for regenerating a week's list; unset values fall back to config."""
    target_servings: Optional[float] = Field(None, gt=0, le=100)
    preserve_manual: Optional[bool] = None


class PriceEntryInput(BaseModel):
    item: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0, le=MAX_AMOUNT)
    store: Optional[str] = Field(None, max_length=100)
    date: Optional[dt.date] = None


class PriceLogInput(BaseModel):
    """Schema for logging actual prices after shopping."""
    prices: List[PriceEntryInput] = Field(..., min_length=1)
