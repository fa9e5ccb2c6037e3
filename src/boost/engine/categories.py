import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

OTHER = "other"

PLACE_TYPE_CATEGORY_MAP: dict[str, str] = {
    "acai_shop": "dining",
    "afghani_restaurant": "dining",
    "african_restaurant": "dining",
    "american_restaurant": "dining",
    "asian_restaurant": "dining",
    "bagel_shop": "dining",
    "bakery": "dining",
    "bar": "dining",
    "bar_and_grill": "dining",
    "barbecue_restaurant": "dining",
    "brazilian_restaurant": "dining",
    "breakfast_restaurant": "dining",
    "brunch_restaurant": "dining",
    "buffet_restaurant": "dining",
    "cafe": "dining",
    "cafeteria": "dining",
    "candy_store": "dining",
    "cat_cafe": "dining",
    "catering_service": "dining",
    "chinese_restaurant": "dining",
    "chocolate_factory": "dining",
    "chocolate_shop": "dining",
    "coffee_shop": "dining",
    "car_rental": "rental_cars",
    "confectionery": "dining",
    "deli": "dining",
    "dessert_restaurant": "dining",
    "dessert_shop": "dining",
    "diner": "dining",
    "dog_cafe": "dining",
    "donut_shop": "dining",
    "fast_food_restaurant": "dining",
    "fine_dining_restaurant": "dining",
    "food": "dining",
    "food_court": "dining",
    "french_restaurant": "dining",
    "greek_restaurant": "dining",
    "hamburger_restaurant": "dining",
    "ice_cream_shop": "dining",
    "indian_restaurant": "dining",
    "indonesian_restaurant": "dining",
    "italian_restaurant": "dining",
    "japanese_restaurant": "dining",
    "juice_shop": "dining",
    "korean_restaurant": "dining",
    "lebanese_restaurant": "dining",
    "meal_delivery": "dining",
    "meal_takeaway": "dining",
    "mediterranean_restaurant": "dining",
    "mexican_restaurant": "dining",
    "middle_eastern_restaurant": "dining",
    "pizza_restaurant": "dining",
    "pub": "dining",
    "ramen_restaurant": "dining",
    "restaurant": "dining",
    "sandwich_shop": "dining",
    "seafood_restaurant": "dining",
    "spanish_restaurant": "dining",
    "steak_house": "dining",
    "sushi_restaurant": "dining",
    "tea_house": "dining",
    "thai_restaurant": "dining",
    "turkish_restaurant": "dining",
    "vegan_restaurant": "dining",
    "vegetarian_restaurant": "dining",
    "vietnamese_restaurant": "dining",
    "wine_bar": "dining",
    "pharmacy": "drugstore",
    "drugstore": "drugstore",
    "convenience_store": "drugstore",
    "airport": "other_travel",
    "extended_stay_hotel": "hotels",
    "lodging": "hotels",
    "hotel": "hotels",
    "bed_and_breakfast": "hotels",
    "budget_japanese_inn": "hotels",
    "inn": "hotels",
    "japanese_inn": "hotels",
    "motel": "hotels",
    "resort_hotel": "hotels",
    "train_station": "transit",
    "bus_station": "transit",
    "subway_station": "transit",
    "light_rail_station": "transit",
    "transit_station": "transit",
    "gas_station": "gas",
    "asian_grocery_store": "groceries",
    "grocery_store": "groceries",
    "grocery_or_supermarket": "groceries",
}

# Display name -> reward-table keys that mean the same thing.
CATEGORY_MAPPING: dict[str, list[str]] = {
    "Restaurants": ["dining", "restaurant", "restaurants", "food"],
    "Groceries": ["groceries"],
    "Drugstore": ["drugstore", "pharmacy", "pharmacies", "health"],
    "Gas": ["gas", "fuel", "gasoline", "petrol"],
    "Transit": ["transit"],
}


def resolve_category(raw_type: str | None) -> str:
    if not raw_type:
        return OTHER
    category = PLACE_TYPE_CATEGORY_MAP.get(raw_type, OTHER)
    logger.debug("Resolved place type %r to category %r", raw_type, category)
    return category


def resolve_place_category(types: Sequence[str] | None) -> str:
    """Category for a place, decided by its primary (first) type only."""
    if not types:
        return OTHER
    return resolve_category(types[0])


def get_database_keys(display_category: str) -> list[str]:
    keys = CATEGORY_MAPPING.get(display_category)
    if keys is None:
        return [display_category.lower()]
    return list(keys)


def display_category(category: str) -> str:
    return " ".join(word.capitalize() for word in category.replace("_", " ").split())
