"""
UI Helper Functions for the shared layout
==========================================

Navigation model, per-page CSS classes and per-blueprint assets used by
``templates/base.html``.
"""

from flask import request, url_for
from typing import List, Dict, Optional


# (endpoint, label) in navbar order
NAV_ITEMS = (
    ('pages.home', 'Home'),
    ('pages.resume', 'Resume'),
    ('pages.projects', 'Projects'),
    ('pages.skills', 'Skills'),
    ('pages.contact', 'Contact'),
)


def get_nav_links(current_endpoint: Optional[str]) -> List[Dict[str, object]]:
    """
    Build the navbar links

    Args:
        current_endpoint: endpoint of the page being rendered

    Returns:
        list: dicts with ``label``, ``url`` and ``active``
    """
    return [
        {
            'label': label,
            'url': url_for(endpoint),
            'active': endpoint == current_endpoint,
        }
        for endpoint, label in NAV_ITEMS
    ]


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """CSS files loaded on top of the base stylesheet for a blueprint"""
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'pages': [
            'css/pages.css',
        ],
    }

    return blueprint_css_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, object]:
    """Assets for the blueprint handling the current request"""
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the <body> of a page

    Example:
        >>> get_page_specific_class('pages', 'projects')
        'page-pages page-pages-projects'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
