"""Error taxonomy registry.

The registry is the static knowledge base mapping an error code to its
``ErrorDescriptor``. It is built once at import time from two ordered
layers and is read-only afterwards:

1. ``application`` - errors caused by application code or configuration.
2. ``platform`` - internal platform errors; users should contact support.

Merge policy: layers are merged left to right and a later layer replaces
an earlier layer's entry for the same code *in full* (no field-level
merge). The platform layer is therefore authoritative for codes defined
in both partitions, e.g. ``FUNCTION_THROTTLED`` resolves to the
``Internal`` / contact-support descriptor.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .codes import ErrorCategory
from .models import ErrorDescriptor

# =============================================================================
# Partitions
# =============================================================================

APPLICATION_ERRORS: tuple[ErrorDescriptor, ...] = (
    # Function errors
    ErrorDescriptor(
        code="BODY_NOT_A_STRING_FROM_FUNCTION",
        category=ErrorCategory.FUNCTION,
        status_code=502,
        message="Function returned a non-string value",
        description=(
            "A serverless function returned a value that is not a string. "
            "Functions must return strings or Response objects."
        ),
        user_message="The server encountered an error processing your request. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="EDGE_FUNCTION_INVOCATION_FAILED",
        category=ErrorCategory.FUNCTION,
        status_code=500,
        message="Edge function invocation failed",
        description="An edge function failed to execute properly.",
        user_message="A server error occurred. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="EDGE_FUNCTION_INVOCATION_TIMEOUT",
        category=ErrorCategory.FUNCTION,
        status_code=504,
        message="Edge function execution timed out",
        description="An edge function took too long to execute and was terminated.",
        user_message="The request took too long to process. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="FUNCTION_INVOCATION_FAILED",
        category=ErrorCategory.FUNCTION,
        status_code=500,
        message="Function invocation failed",
        description="A serverless function failed to execute properly.",
        user_message="A server error occurred. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="FUNCTION_INVOCATION_TIMEOUT",
        category=ErrorCategory.FUNCTION,
        status_code=504,
        message="Function execution timed out",
        description="A serverless function took too long to execute and was terminated.",
        user_message="The request took too long to process. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="FUNCTION_PAYLOAD_TOO_LARGE",
        category=ErrorCategory.FUNCTION,
        status_code=413,
        message="Request payload too large",
        description="The request body exceeds the maximum allowed size for serverless functions.",
        user_message=(
            "The data you're trying to send is too large. "
            "Please reduce the size and try again."
        ),
        actionable=True,
    ),
    ErrorDescriptor(
        code="FUNCTION_RESPONSE_PAYLOAD_TOO_LARGE",
        category=ErrorCategory.FUNCTION,
        status_code=500,
        message="Response payload too large",
        description="The function response exceeds the maximum allowed size.",
        user_message="The server response is too large. Please contact support if this persists.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="FUNCTION_THROTTLED",
        category=ErrorCategory.FUNCTION,
        status_code=503,
        message="Function rate limit exceeded",
        description="Too many requests to the function. Rate limit exceeded.",
        user_message="Too many requests. Please wait a moment and try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="NO_RESPONSE_FROM_FUNCTION",
        category=ErrorCategory.FUNCTION,
        status_code=502,
        message="No response from function",
        description="The function did not return a response.",
        user_message="The server did not respond. Please try again.",
        actionable=True,
    ),

    # Deployment errors
    ErrorDescriptor(
        code="DEPLOYMENT_BLOCKED",
        category=ErrorCategory.DEPLOYMENT,
        status_code=403,
        message="Deployment blocked",
        description="The deployment was blocked, possibly due to security or policy restrictions.",
        user_message="This deployment is currently unavailable. Please contact support.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DEPLOYMENT_DELETED",
        category=ErrorCategory.DEPLOYMENT,
        status_code=410,
        message="Deployment deleted",
        description="The requested deployment has been deleted.",
        user_message="This deployment no longer exists.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DEPLOYMENT_DISABLED",
        category=ErrorCategory.DEPLOYMENT,
        status_code=402,
        message="Deployment disabled",
        description="The deployment has been disabled, possibly due to billing issues.",
        user_message="This deployment is currently disabled. Please check your account status.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DEPLOYMENT_NOT_FOUND",
        category=ErrorCategory.DEPLOYMENT,
        status_code=404,
        message="Deployment not found",
        description="The requested deployment could not be found.",
        user_message="The requested page or resource could not be found.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="DEPLOYMENT_NOT_READY_REDIRECTING",
        category=ErrorCategory.DEPLOYMENT,
        status_code=303,
        message="Deployment not ready, redirecting",
        description="The deployment is not ready yet and is redirecting to a ready version.",
        user_message="Redirecting to the latest version...",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DEPLOYMENT_PAUSED",
        category=ErrorCategory.DEPLOYMENT,
        status_code=503,
        message="Deployment paused",
        description="The deployment has been paused.",
        user_message="This deployment is currently paused. Please check your dashboard.",
        actionable=False,
    ),

    # DNS errors
    ErrorDescriptor(
        code="DNS_HOSTNAME_EMPTY",
        category=ErrorCategory.DNS,
        status_code=502,
        message="DNS hostname is empty",
        description="The DNS hostname configuration is empty or invalid.",
        user_message="DNS configuration error. Please contact support.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DNS_HOSTNAME_NOT_FOUND",
        category=ErrorCategory.DNS,
        status_code=502,
        message="DNS hostname not found",
        description="The DNS hostname could not be resolved.",
        user_message="Domain configuration error. Please check your DNS settings.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DNS_HOSTNAME_RESOLVE_FAILED",
        category=ErrorCategory.DNS,
        status_code=502,
        message="DNS resolution failed",
        description="Failed to resolve the DNS hostname.",
        user_message="Unable to resolve domain. Please check your DNS configuration.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DNS_HOSTNAME_RESOLVED_PRIVATE",
        category=ErrorCategory.DNS,
        status_code=404,
        message="DNS resolved to private IP",
        description="The DNS hostname resolved to a private IP address, which is not allowed.",
        user_message="Invalid domain configuration. Private IP addresses are not allowed.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="DNS_HOSTNAME_SERVER_ERROR",
        category=ErrorCategory.DNS,
        status_code=502,
        message="DNS server error",
        description="An error occurred with the DNS server.",
        user_message="DNS server error. Please try again later.",
        actionable=True,
    ),

    # Cache errors
    ErrorDescriptor(
        code="FALLBACK_BODY_TOO_LARGE",
        category=ErrorCategory.CACHE,
        status_code=502,
        message="Fallback response too large",
        description="The fallback response exceeds the maximum allowed size.",
        user_message="The response is too large. Please try again.",
        actionable=True,
    ),

    # Runtime errors
    ErrorDescriptor(
        code="INFINITE_LOOP_DETECTED",
        category=ErrorCategory.RUNTIME,
        status_code=508,
        message="Infinite loop detected",
        description="An infinite loop was detected in the code execution.",
        user_message="A processing error occurred. Please refresh the page.",
        actionable=True,
    ),

    # Image errors
    ErrorDescriptor(
        code="INVALID_IMAGE_OPTIMIZE_REQUEST",
        category=ErrorCategory.IMAGE,
        status_code=400,
        message="Invalid image optimization request",
        description="The image optimization request is invalid.",
        user_message="Invalid image request. Please check the image URL.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="OPTIMIZED_EXTERNAL_IMAGE_REQUEST_FAILED",
        category=ErrorCategory.IMAGE,
        status_code=502,
        message="External image optimization failed",
        description="Failed to fetch or optimize an external image.",
        user_message="Unable to load the image. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="OPTIMIZED_EXTERNAL_IMAGE_REQUEST_INVALID",
        category=ErrorCategory.IMAGE,
        status_code=502,
        message="Invalid external image request",
        description="The external image request is invalid.",
        user_message="Invalid image URL. Please check the image source.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="OPTIMIZED_EXTERNAL_IMAGE_REQUEST_UNAUTHORIZED",
        category=ErrorCategory.IMAGE,
        status_code=502,
        message="Unauthorized external image request",
        description="The external image request is not authorized.",
        user_message="Unable to access the image. Access may be restricted.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="OPTIMIZED_EXTERNAL_IMAGE_TOO_MANY_REDIRECTS",
        category=ErrorCategory.IMAGE,
        status_code=502,
        message="Too many redirects for external image",
        description="The external image URL resulted in too many redirects.",
        user_message="Image URL has too many redirects. Please check the image source.",
        actionable=True,
    ),

    # Request errors
    ErrorDescriptor(
        code="INVALID_REQUEST_METHOD",
        category=ErrorCategory.REQUEST,
        status_code=405,
        message="Invalid request method",
        description="The HTTP method used is not allowed for this endpoint.",
        user_message="Invalid request method. Please try a different action.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="MALFORMED_REQUEST_HEADER",
        category=ErrorCategory.REQUEST,
        status_code=400,
        message="Malformed request header",
        description="One or more request headers are malformed.",
        user_message="Invalid request. Please refresh the page and try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="REQUEST_HEADER_TOO_LARGE",
        category=ErrorCategory.REQUEST,
        status_code=431,
        message="Request header too large",
        description="The request headers exceed the maximum allowed size.",
        user_message="Request is too large. Please clear your browser cache and try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="URL_TOO_LONG",
        category=ErrorCategory.REQUEST,
        status_code=414,
        message="URL too long",
        description="The request URL exceeds the maximum allowed length.",
        user_message="The URL is too long. Please use a shorter URL or different method.",
        actionable=True,
    ),

    # Range request errors
    ErrorDescriptor(
        code="RANGE_END_NOT_VALID",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Invalid range end value",
        description="The Range header end value is invalid.",
        user_message="Invalid request range. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="RANGE_GROUP_NOT_VALID",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Invalid range group",
        description="The Range header group is invalid.",
        user_message="Invalid request range. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="RANGE_MISSING_UNIT",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Range header missing unit",
        description="The Range header is missing the unit specification.",
        user_message="Invalid request range. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="RANGE_START_NOT_VALID",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Invalid range start value",
        description="The Range header start value is invalid.",
        user_message="Invalid request range. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="RANGE_UNIT_NOT_SUPPORTED",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Range unit not supported",
        description="The Range header unit is not supported.",
        user_message="Invalid request range. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="TOO_MANY_RANGES",
        category=ErrorCategory.REQUEST,
        status_code=416,
        message="Too many range requests",
        description="The request contains too many range specifications.",
        user_message="Too many range requests. Please simplify your request.",
        actionable=True,
    ),

    # Middleware errors
    ErrorDescriptor(
        code="MIDDLEWARE_INVOCATION_FAILED",
        category=ErrorCategory.FUNCTION,
        status_code=500,
        message="Middleware invocation failed",
        description="The middleware function failed to execute.",
        user_message="A server error occurred. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="MIDDLEWARE_INVOCATION_TIMEOUT",
        category=ErrorCategory.FUNCTION,
        status_code=504,
        message="Middleware execution timed out",
        description="The middleware function took too long to execute.",
        user_message="The request took too long. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="MIDDLEWARE_RUNTIME_DEPRECATED",
        category=ErrorCategory.RUNTIME,
        status_code=503,
        message="Middleware runtime deprecated",
        description="The middleware runtime version is deprecated.",
        user_message="Service temporarily unavailable. Please try again later.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="MICROFRONTENDS_MIDDLEWARE_ERROR",
        category=ErrorCategory.FUNCTION,
        status_code=500,
        message="Microfrontends middleware error",
        description="An error occurred in the microfrontends middleware.",
        user_message="A server error occurred. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="MICROFRONTENDS_MISSING_FALLBACK_ERROR",
        category=ErrorCategory.FUNCTION,
        status_code=400,
        message="Microfrontends missing fallback",
        description="The microfrontends configuration is missing a required fallback.",
        user_message="Configuration error. Please contact support.",
        actionable=False,
    ),

    # Routing errors
    ErrorDescriptor(
        code="ROUTER_CANNOT_MATCH",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="Router cannot match route",
        description="The router could not match the requested route.",
        user_message="Unable to process the request. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="ROUTER_EXTERNAL_TARGET_CONNECTION_ERROR",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="External target connection error",
        description="Failed to connect to the external routing target.",
        user_message="Connection error. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="ROUTER_EXTERNAL_TARGET_ERROR",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="External target error",
        description="An error occurred with the external routing target.",
        user_message="External service error. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="ROUTER_EXTERNAL_TARGET_HANDSHAKE_ERROR",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="External target handshake error",
        description="Failed to establish connection with external routing target.",
        user_message="Connection error. Please try again later.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="ROUTER_TOO_MANY_HAS_SELECTIONS",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="Too many route has selections",
        description="The route configuration has too many has selections.",
        user_message="Configuration error. Please contact support.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="TOO_MANY_FILESYSTEM_CHECKS",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="Too many filesystem checks",
        description="Too many filesystem checks were performed during routing.",
        user_message="Routing error. Please try again.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="TOO_MANY_FORKS",
        category=ErrorCategory.ROUTING,
        status_code=502,
        message="Too many route forks",
        description="The routing configuration has too many forks.",
        user_message="Configuration error. Please contact support.",
        actionable=False,
    ),

    # Sandbox errors
    ErrorDescriptor(
        code="SANDBOX_NOT_FOUND",
        category=ErrorCategory.SANDBOX,
        status_code=404,
        message="Sandbox not found",
        description="The requested sandbox environment could not be found.",
        user_message="Development environment not found.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="SANDBOX_NOT_LISTENING",
        category=ErrorCategory.SANDBOX,
        status_code=502,
        message="Sandbox not listening",
        description="The sandbox environment is not listening for requests.",
        user_message="Development environment is not available.",
        actionable=False,
    ),
    ErrorDescriptor(
        code="SANDBOX_STOPPED",
        category=ErrorCategory.SANDBOX,
        status_code=410,
        message="Sandbox stopped",
        description="The sandbox environment has been stopped.",
        user_message="Development environment has been stopped.",
        actionable=False,
    ),

    # General errors
    ErrorDescriptor(
        code="NOT_FOUND",
        category=ErrorCategory.DEPLOYMENT,
        status_code=404,
        message="Resource not found",
        description="The requested resource could not be found.",
        user_message="The page you're looking for doesn't exist.",
        actionable=True,
    ),
    ErrorDescriptor(
        code="RESOURCE_NOT_FOUND",
        category=ErrorCategory.REQUEST,
        status_code=404,
        message="Resource not found",
        description="The requested resource could not be found.",
        user_message="The requested resource could not be found.",
        actionable=True,
    ),
)

# Internal platform failures. Codes repeated from APPLICATION_ERRORS take
# precedence when the layers are merged.
PLATFORM_ERRORS: tuple[ErrorDescriptor, ...] = (
    ErrorDescriptor(
        code="FUNCTION_THROTTLED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Function throttled (internal)",
        description="Internal function throttling error. Contact Vercel support.",
        user_message="Service temporarily unavailable. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_CACHE_ERROR",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal cache error",
        description="An internal cache error occurred. Contact Vercel support.",
        user_message="A server error occurred. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_CACHE_KEY_TOO_LONG",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal cache key too long",
        description="The cache key exceeds the maximum length. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_CACHE_LOCK_FULL",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal cache lock full",
        description="The cache lock is full. Contact Vercel support.",
        user_message="Service temporarily unavailable. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_CACHE_LOCK_TIMEOUT",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal cache lock timeout",
        description="The cache lock operation timed out. Contact Vercel support.",
        user_message="Service temporarily unavailable. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_DEPLOYMENT_FETCH_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal deployment fetch failed",
        description="Failed to fetch deployment internally. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_EDGE_FUNCTION_INVOCATION_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal edge function invocation failed",
        description="Internal edge function error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_EDGE_FUNCTION_INVOCATION_TIMEOUT",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal edge function invocation timeout",
        description="Internal edge function timeout. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_FUNCTION_INVOCATION_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal function invocation failed",
        description="Internal function error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_FUNCTION_INVOCATION_TIMEOUT",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal function invocation timeout",
        description="Internal function timeout. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_FUNCTION_NOT_FOUND",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal function not found",
        description="Internal function could not be found. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_FUNCTION_NOT_READY",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal function not ready",
        description="Internal function is not ready. Contact Vercel support.",
        user_message="Service temporarily unavailable. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_FUNCTION_SERVICE_UNAVAILABLE",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal function service unavailable",
        description="Internal function service is unavailable. Contact Vercel support.",
        user_message="Service temporarily unavailable. Please try again later or contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_MICROFRONTENDS_BUILD_ERROR",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal microfrontends build error",
        description="Internal microfrontends build error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_MICROFRONTENDS_INVALID_CONFIGURATION_ERROR",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal microfrontends configuration error",
        description="Internal microfrontends configuration error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_MICROFRONTENDS_UNEXPECTED_ERROR",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal microfrontends unexpected error",
        description="Unexpected internal microfrontends error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_MISSING_RESPONSE_FROM_CACHE",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal missing response from cache",
        description="Internal cache response missing. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_OPTIMIZED_IMAGE_REQUEST_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal optimized image request failed",
        description="Internal image optimization error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_ROUTER_CANNOT_PARSE_PATH",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal router cannot parse path",
        description="Internal routing error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_STATIC_REQUEST_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal static request failed",
        description="Internal static file serving error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_UNARCHIVE_FAILED",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal unarchive failed",
        description="Internal archive extraction error. Contact Vercel support.",
        user_message="A server error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
    ErrorDescriptor(
        code="INTERNAL_UNEXPECTED_ERROR",
        category=ErrorCategory.INTERNAL,
        status_code=500,
        message="Internal unexpected error",
        description="An unexpected internal error occurred. Contact Vercel support.",
        user_message="An unexpected error occurred. Please contact support.",
        actionable=False,
        contact_support=True,
    ),
)


# =============================================================================
# Layered registry
# =============================================================================


@dataclass(frozen=True)
class RegistryLayer:
    """A named, ordered partition of descriptors."""

    name: str
    entries: tuple[ErrorDescriptor, ...]


class ErrorRegistry(Mapping[str, ErrorDescriptor]):
    """Immutable mapping from error code to descriptor.

    Built from one or more layers merged left to right; the last layer
    defining a code wins the whole entry. Codes defined by more than one
    layer are reported by ``overridden_codes``.

    Example:
        registry = ErrorRegistry(
            RegistryLayer("application", APPLICATION_ERRORS),
            RegistryLayer("platform", PLATFORM_ERRORS),
        )
        registry.lookup("FUNCTION_THROTTLED").category  # ErrorCategory.INTERNAL
    """

    def __init__(self, *layers: RegistryLayer) -> None:
        merged: dict[str, ErrorDescriptor] = {}
        owners: dict[str, list[str]] = {}

        for layer in layers:
            seen: set[str] = set()
            for descriptor in layer.entries:
                if descriptor.code in seen:
                    raise ValueError(
                        f"Duplicate code {descriptor.code!r} in layer {layer.name!r}"
                    )
                seen.add(descriptor.code)
                merged[descriptor.code] = descriptor
                owners.setdefault(descriptor.code, []).append(layer.name)

        self._layers = tuple(layer.name for layer in layers)
        self._entries: Mapping[str, ErrorDescriptor] = MappingProxyType(merged)
        self._owners: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {code: tuple(names) for code, names in owners.items()}
        )

    def __getitem__(self, code: str) -> ErrorDescriptor:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ErrorRegistry(layers={self._layers!r}, codes={len(self)})"

    @property
    def layers(self) -> tuple[str, ...]:
        """Layer names in merge order."""
        return self._layers

    def lookup(self, code: object) -> ErrorDescriptor | None:
        """Return the descriptor for ``code``, or None if it is not registered.

        Never raises; non-string inputs are simply absent.
        """
        if not isinstance(code, str):
            return None
        return self._entries.get(code)

    def authoritative_layer(self, code: str) -> str | None:
        """Name of the layer whose entry is served for ``code``."""
        names = self._owners.get(code)
        return names[-1] if names else None

    @property
    def overridden_codes(self) -> dict[str, str]:
        """Codes defined in more than one layer, mapped to the winning layer."""
        return {
            code: names[-1] for code, names in self._owners.items() if len(names) > 1
        }

    def codes_in(self, category: ErrorCategory) -> list[ErrorDescriptor]:
        """All descriptors of one category, in registry order."""
        return [d for d in self._entries.values() if d.category == category]


APPLICATION_LAYER = RegistryLayer("application", APPLICATION_ERRORS)
PLATFORM_LAYER = RegistryLayer("platform", PLATFORM_ERRORS)

REGISTRY = ErrorRegistry(APPLICATION_LAYER, PLATFORM_LAYER)
"""Process-wide registry. Read-only; shared by every classification call."""


def get_error_by_code(code: object) -> ErrorDescriptor | None:
    """Get the descriptor for a code from the process-wide registry."""
    return REGISTRY.lookup(code)
