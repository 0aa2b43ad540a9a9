"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource collection.  The
routers are aggregated in ``router.py`` one level up.
"""
