"""
Navigation sections for the web interface.
Decides which navbar link a rendered page highlights.
"""

from enum import Enum


class Section(Enum):
    """Navbar sections"""
    LIST = "list"
    ADD = "add"
    UPDATE = "update"
    NONE = ""


def section_for_path(path: str) -> Section:
    """
    Map a request path to its navbar section

    Args:
        path: Request path (e.g., '/update/<id>')

    Returns:
        Section to highlight
    """
    if path == '/':
        return Section.LIST
    if path.startswith('/add'):
        return Section.ADD
    if path.startswith('/update'):
        return Section.UPDATE
    return Section.NONE
