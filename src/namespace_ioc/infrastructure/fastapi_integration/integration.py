from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from namespace_ioc.domain import IContainer

REQUEST_STATE_ATTRIBUTE = "ioc_container"


def create_fastapi_dependency(container: IContainer, namespace: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a namespace.

    The resolved value follows the namespace's binding (singleton or
    transient), autoload rule or alias, exactly as `use` would.

    Args:
        container: The IoC container to resolve from.
        namespace: The namespace to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = IocContainer()
        >>> container.singleton("App/Repositories/User", lambda c: UserRepository(c.use("Database")))
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, "App/Repositories/User")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the namespace from the container."""
        return container.use(namespace)

    return dependency


def create_method_dependency(container: IContainer, reference: str) -> Callable[[], Callable[..., Any]]:
    """Create a FastAPI Depends() callable returning a controller method.

    The reference is resolved with ``make_func`` on every request, so the
    controller is built with its dependencies injected.

    Args:
        container: The IoC container to resolve from.
        reference: A ``namespace.method`` reference.

    Returns:
        A callable producing the bound method.

    Example:
        >>> get_index = create_method_dependency(container, "App/Http/UserController.index")
        >>>
        >>> @app.get("/users")
        >>> def users(index=Depends(get_index)):
        ...     return index()
    """

    def dependency() -> Callable[..., Any]:
        """Build the instance and return its bound method."""
        return container.make_func(reference).bound()

    return dependency


def create_request_dependency(namespace: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency resolving from the container attached to the request.

    Requires the ContainerMiddleware to be installed.

    Args:
        namespace: The namespace to resolve.

    Returns:
        A callable that resolves from ``request.state.ioc_container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> get_mailer = create_request_dependency("Mailer")
        >>>
        >>> @app.post("/invite")
        >>> async def invite(mailer: Mailer = Depends(get_mailer)):
        ...     return mailer.send()
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the request's container."""
        container = getattr(request.state, REQUEST_STATE_ATTRIBUTE, None)
        if container is None:
            raise RuntimeError(
                "Request does not have an IoC container. Did you forget to add ContainerMiddleware?"
            )
        return container.use(namespace)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes the IoC container on every request.

    The container is accessible via ``request.state.ioc_container``.

    Attributes:
        container: The IoC container handed to each request.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     config = request.state.ioc_container.use("Config")
        ...     return {"name": config.name}
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware with the container.

        Args:
            app: The FastAPI/Starlette application.
            container: The IoC container to expose.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        setattr(request.state, REQUEST_STATE_ATTRIBUTE, self.container)
        return await call_next(request)
