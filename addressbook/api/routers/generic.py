"""
Address book router module generic functionalities
"""

from fastapi import APIRouter


router = APIRouter(tags=["Generic"])


async def verify_running_backend():
    """
    Return 200 OK with an empty object as body to only verify that the service and the middlewares work
    """

    return {}


ROUTES = (
    ("GET", "/health", verify_running_backend, {}),
)

for _method, _path, _endpoint, _options in ROUTES:
    router.add_api_route(_path, _endpoint, methods=[_method], **_options)
