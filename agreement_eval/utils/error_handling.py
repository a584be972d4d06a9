"""
Standardized error handling for agreement-eval.

Library errors derive from :class:`AgreementError` and pass through untouched;
anything else raised inside a decorated function is wrapped into the requested
error type, logged, and re-raised with the original exception as its cause.
"""
import functools
from typing import Any, Callable, Optional, Type, TypeVar

from ..types import AgreementError
from .logging_config import get_logger

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(
    error_type: Type[AgreementError] = AgreementError,
    reraise: bool = True,
    log_errors: bool = True,
    return_value: Optional[Any] = None,
) -> Callable[[F], F]:
    """
    Decorator for standardized error handling.

    Args:
        error_type: Exception type to wrap foreign exceptions into
        reraise: Whether to reraise the wrapped exception
        log_errors: Whether to log errors
        return_value: Value to return on error (if not reraising)

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        logger = get_logger(func.__module__)
        func_name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except AgreementError:
                raise

            except Exception as e:
                context = {"function": func_name}
                if args:
                    args_str = str(args)[:100]
                    if len(args_str) < 100:
                        context["args"] = args_str

                wrapped_error = error_type(
                    message=f"Error in {func_name}: {e}",
                    context=context,
                    cause=e,
                )

                if log_errors:
                    error_dict = wrapped_error.to_dict()
                    # 'message' clashes with a LogRecord attribute
                    error_dict.pop("message", None)
                    logger.error(f"Error in {func_name}: {e}", extra=error_dict)

                if reraise:
                    raise wrapped_error from e
                return return_value

        return wrapper  # type: ignore

    return decorator
