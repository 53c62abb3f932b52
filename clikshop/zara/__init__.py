"""Zara Turkey category tree, listing and product page models and their conversion."""