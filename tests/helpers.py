"""Assertion helpers for rendered pages."""

import re

RESUME_BYTES = b'%PDF-1.4\n% test resume\n%%EOF\n'


def html_class(response):
    """Class attribute of the <html> element in a rendered page"""
    match = re.search(r'<html[^>]*\sclass="([^"]*)"', response.get_data(as_text=True))
    assert match is not None
    return match.group(1)


def theme_cookie(client):
    """Value of the theme cookie held by a test client, or None"""
    cookie = client.get_cookie('theme')
    return cookie.value if cookie is not None else None
