"""
DeDash food-delivery browsing UI.

Responsibilities:
- Serve a home page listing restaurants from a static dataset.
- Order the listing by distance, rating or delivery time.
- Render a restaurant detail page with its menu.
"""
