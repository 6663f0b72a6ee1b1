import inspect
from typing import List

from namespace_ioc.domain import IDependencyIntrospector


class SignatureIntrospector(IDependencyIntrospector):
    """Derives dependency namespaces from constructor parameter names.

    Parameter names map onto namespaces by turning underscores into the
    namespace separator, so ``App_Services_Mailer`` depends on
    ``App/Services/Mailer``. Parameters with defaults and variadic
    parameters are not dependencies. Keyword-only parameters without a
    default cannot be injected positionally and are rejected.

    Attributes:
        separator: Namespace separator substituted for underscores.
    """

    def __init__(self, separator: str = "/") -> None:
        self.separator = separator

    def declared_dependencies(self, constructible: type) -> List[str]:
        """Return the namespaces named by the constructor's parameters.

        Args:
            constructible: The class to inspect.

        Returns:
            Namespaces in parameter order.

        Example:
            >>> class UserController:
            ...     def __init__(self, App_Repositories_User, Mailer):
            ...         ...
            >>>
            >>> SignatureIntrospector().declared_dependencies(UserController)
            ['App/Repositories/User', 'Mailer']

        Raises:
            TypeError: If a keyword-only parameter has no default.
        """
        signature = inspect.signature(constructible.__init__)

        dependencies = []
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue

            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            if param.default is not inspect.Parameter.empty:
                continue

            if param.kind == inspect.Parameter.KEYWORD_ONLY:
                raise TypeError(
                    f"Cannot inject keyword-only parameter '{param_name}' of {constructible.__name__}, "
                    "dependencies are passed positionally"
                )

            dependencies.append(param_name.replace("_", self.separator))

        return dependencies
