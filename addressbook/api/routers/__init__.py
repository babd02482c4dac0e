"""
Address book router modules for handling requests to various endpoints

This module exports the ``router`` object which includes all known
endpoints and path operations. Each router module declares its
operations in a ``ROUTES`` table which is registered at import time.
"""

from fastapi import APIRouter

# The order of the imports defines the order of the endpoints in the OpenAPI documentation
from . import contacts, generic


router = APIRouter()
router.include_router(contacts.router)
router.include_router(generic.router)
