MENU_NOT_FOUND = "Sorry, I don't have that menu."

# Prices are in rupees
MENUS = {
    "breakfast": [
        {"name": "Aloo Paratha", "price": 40},
        {"name": "Poha", "price": 30},
        {"name": "Idli Sambar", "price": 35},
        {"name": "Dosa with Coconut Chutney", "price": 40},
        {"name": "Bread Omelette", "price": 35},
        {"name": "Filter Coffee", "price": 20},
    ],
    "lunch": [
        {"name": "Paneer Butter Masala", "price": 120},
        {"name": "Dal Tadka", "price": 80},
        {"name": "Jeera Rice", "price": 60},
        {"name": "Roti (2 pieces)", "price": 20},
        {"name": "Rajma Masala", "price": 100},
        {"name": "Vegetable Biryani", "price": 130},
        {"name": "Salad", "price": 40},
        {"name": "Mango Lassi", "price": 50},
    ],
    "dinner": [
        {"name": "Veg Biryani", "price": 130},
        {"name": "Matar Paneer", "price": 120},
        {"name": "Dal Makhani", "price": 100},
        {"name": "Butter Naan (2 pieces)", "price": 40},
        {"name": "Gulab Jamun", "price": 40},
        {"name": "Masala Chai", "price": 20},
    ],
}


def get_category_dishes(category: str):
    """Return the dishes of a meal category, or None if there is no such menu."""
    return MENUS.get(category.lower().strip())


def format_menu(category: str) -> str:
    """
    Render a category as "Name (₹price), Name (₹price), ..." in menu order.
    Unknown categories get the fixed fallback text.
    """
    dishes = get_category_dishes(category)
    if not dishes:
        return MENU_NOT_FOUND
    return ", ".join(f"{dish['name']} (₹{dish['price']})" for dish in dishes)


def dish_names(category: str, limit: int) -> list[str]:
    dishes = get_category_dishes(category) or []
    return [dish["name"] for dish in dishes[:limit]]
