"""In-memory registry for swapping model implementations at runtime."""
from typing import Any, Callable, Dict, List

_REGISTRY: Dict[str, Callable[..., Any]] = {}

# Factory ``(InterviewerOptions) -> generate`` used by the API instead of the HTTP gateway
GENERATOR_KEY = "models.interviewer_generator"


def bind_model(key: str, fn: Callable[..., Any]) -> None:
    """Bind a callable implementation to a registry key, replacing any previous binding."""
    _REGISTRY[key] = fn


def unbind_model(key: str) -> None:
    _REGISTRY.pop(key, None)


def bound_keys() -> List[str]:
    return sorted(_REGISTRY)


def get_model(key: str) -> Callable[..., Any]:
    """Retrieve a callable from the registry.

    Raises:
        KeyError: If nothing has been bound for ``key``.
    """

    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(f"Model not bound in registry: {key}") from None
