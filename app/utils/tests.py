from typing import Any, Callable, Optional

import httpx
from fastapi import FastAPI


def create_test_app(
    routers,
    middlewares=None,
    gate_errors: bool = False,
    overrides: Optional[dict[Callable[..., Any], Callable[..., Any]]] = None,
) -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    Args:
        routers: A router or list of routers to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples,
            added in order (the last one is outermost).
        gate_errors: Register the session gate exception handlers, so
            AuthenticationRequired/AuthorizationDenied become 401/403/redirects.
        overrides: Optional FastAPI dependency overrides.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(
            [router],
            middlewares=[(LocaleMiddleware, {"resolver": resolver})],
            gate_errors=True,
            overrides={get_gate: lambda: gate},
        )
    """
    app = FastAPI()

    # Rate limited routes need the limiter on app.state
    from api.dependencies.rate_limits import setup_rate_limiter

    setup_rate_limiter(app)

    if gate_errors:
        from server.exception_handlers import register_exception_handlers

        register_exception_handlers(app)

    for middleware_class, middleware_config in middlewares or []:
        app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    app.dependency_overrides.update(overrides or {})
    return app


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    expected_status: int = 200,
    headers: Optional[dict] = None,
):
    """
    Exhaust an endpoint's rate limit and check the next request is rejected.

    Args:
        app: The FastAPI app instance.
        endpoint: The endpoint to call with GET.
        request_limit: Number of requests allowed before rate limiting.
        expected_status: Expected status code for requests within the limit.
        headers: Optional headers to include in the requests.
    """
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        for attempt in range(1, request_limit + 1):
            response = await client.get(endpoint, headers=headers or {})
            assert (
                response.status_code == expected_status
            ), f"Request {attempt} to {endpoint} returned {response.status_code}"

        response = await client.get(endpoint, headers=headers or {})
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"message": "Rate limit exceeded"}
