"""Compose the enabled header middlewares into one ``helmet`` middleware."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import partial
from typing import Any

from helmet import registry
from helmet.core.exceptions import HelmetConfigError, RequestPassedAsConfigError
from helmet.core.logging import get_logger
from helmet.schemas.options import OptionsBase
from helmet.types import Middleware, Next

logger = get_logger("helmet.composer")


def _looks_like_request(value: Any) -> bool:
    return hasattr(value, "method") and hasattr(value, "headers")


def _validated_config(config: Any) -> Mapping[str, Any]:
    if config is None:
        return {}
    # Starlette's Request is itself a Mapping, so this check comes first.
    if _looks_like_request(config):
        raise RequestPassedAsConfigError(
            "It appears a request object was passed to helmet(). "
            "Build the middleware with helmet() or helmet(config) and pass the "
            "request to the middleware it returns."
        )
    if not isinstance(config, Mapping):
        raise HelmetConfigError(
            f"helmet() expects a mapping of feature options, got {type(config).__name__}"
        )
    unknown = sorted(str(key) for key in config if key not in registry.FEATURE_NAMES)
    if unknown:
        raise HelmetConfigError(f"Unknown helmet feature(s): {', '.join(unknown)}")
    return config


def _selected_features(config: Mapping[str, Any]) -> Iterator[tuple[registry.Feature, Any]]:
    """Yield ``(feature, options)`` for every feature that should run.

    Absent means the registry default with empty options, ``False`` means
    off, ``True`` means on with empty options and a record means on with
    that record.
    """
    for feature in registry.FEATURES:
        if feature.name not in config:
            if feature.default:
                yield feature, {}
            continue

        value = config[feature.name]
        if value is False:
            continue
        if value is True:
            yield feature, {}
        elif isinstance(value, (Mapping, OptionsBase)):
            yield feature, value
        else:
            raise HelmetConfigError(
                f"{feature.name} must be True, False or a mapping of options, "
                f"got {type(value).__name__}"
            )


def helmet(config: Mapping[str, Any] | None = None) -> Middleware:
    """Build a middleware running every enabled header middleware in registry order.

    The returned callable follows the ``(request, response, call_next)``
    contract: each header middleware calls its continuation once, which
    starts the next one. The first error handed to a continuation skips
    the remaining middlewares and goes straight to ``call_next``.

    Raises:
        HelmetConfigError: ``config`` is not a mapping, names an unknown
            feature, or carries options a feature rejects.
    """
    config = _validated_config(config)
    selected = list(_selected_features(config))
    middlewares = tuple(feature.factory(options) for feature, options in selected)

    logger.debug(
        "Composed helmet middleware",
        extra={"features": [feature.name for feature, _ in selected]},
    )

    def helmet(request: Any, response: Any, call_next: Next) -> None:
        def step(index: int, error: Any = None) -> None:
            if error is not None:
                call_next(error)
            elif index == len(middlewares):
                call_next()
            else:
                middlewares[index](request, response, partial(step, index + 1))

        step(0)

    return helmet
