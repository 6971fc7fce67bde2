import logging

from langchain_core.tools import tool

from exceptions import ToolNotFoundError
from menu_data import dish_names, format_menu

logger = logging.getLogger(__name__)


@tool
def get_menu(category: str) -> str:
    """Get menu for breakfast, lunch or dinner."""
    logger.info("called get_menu %s", category)
    return format_menu(category)


@tool
def plan_breakfast() -> str:
    """Suggest a breakfast."""
    logger.info("called plan_breakfast")
    return f"A nice breakfast would be {', '.join(dish_names('breakfast', 3))}."


@tool
def plan_lunch() -> str:
    """Suggest a lunch."""
    logger.info("called plan_lunch")
    return f"For lunch, I'd suggest {', '.join(dish_names('lunch', 4))}."


@tool
def plan_dinner() -> str:
    """Suggest a dinner."""
    logger.info("called plan_dinner")
    return f"For dinner tonight, {', '.join(dish_names('dinner', 4))} would be a great choice."


@tool
def health_food_advice(condition: str) -> str:
    """
    Food advice for health conditions.
    Use this when the user mentions being unwell, e.g. a cold or an upset stomach.
    """
    logger.info("called health_food_advice %s", condition)
    c = condition.lower()
    if "cold" in c:
        return "Warm soups, tea and light food are best when you have a cold."
    if "stomach" in c:
        return "Go for light meals like rice, curd and banana."
    return "Try to eat light, fresh food and stay hydrated."


@tool
def speciality() -> str:
    """Restaurant speciality."""
    logger.info("called speciality")
    return "Our most loved dishes are Paneer Butter Masala, Dal Makhani and Veg Biryani."


@tool
def opening_hours() -> str:
    """Restaurant opening hours."""
    logger.info("called opening_hours")
    return "We are open every day from 7 AM to 11 PM."


TOOLS = [
    get_menu,
    plan_breakfast,
    plan_lunch,
    plan_dinner,
    health_food_advice,
    speciality,
    opening_hours,
]


def find_tool(name: str, tools=None):
    """Exact-name lookup in the tool registry."""
    for t in tools if tools is not None else TOOLS:
        if t.name == name:
            return t
    raise ToolNotFoundError(name)
