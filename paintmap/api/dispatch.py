"""
Dispatch endpoint - every API function behind one GET
"""
from fastapi import APIRouter, Request

from paintmap.core.dispatcher import dispatch


def build_router(paths) -> APIRouter:
    """
    Router serving the dispatcher on each of `paths`

    Domain failures are reported in the body; the status is always 200.
    """
    router = APIRouter(tags=["dispatch"])

    def handle(request: Request):
        """
        Request:
            ?function=<name>&<arg>=<value>...

        Response:
            {"succeed": true|false, ...}
        """
        return dispatch(request.app.state.paintmap, request.query_params)

    for path in paths:
        router.add_api_route(path, handle, methods=["GET"])

    return router
