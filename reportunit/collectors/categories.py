"""Trait based categories for xUnit v2 elements."""

import xml.etree.ElementTree as ET


CATEGORY_SEPARATOR = ":"


def get_categories(element: ET.Element, all_descendants: bool) -> list[str]:
    """
    Collect the unique "name:value" trait labels found under an element.

    Args:
        element: Element whose <traits> containers are searched
        all_descendants: Search <traits> at any depth when True, only
            direct children when False

    Returns:
        Unique labels in the order they first appear
    """
    path = ".//traits" if all_descendants else "traits"

    categories: dict[str, None] = {}
    for traits in element.findall(path):
        for trait in traits.findall("trait"):
            name = trait.get("name")
            if not name:
                continue
            categories[f"{name}{CATEGORY_SEPARATOR}{trait.get('value', '')}"] = None

    return list(categories)
