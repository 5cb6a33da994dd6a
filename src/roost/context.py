"""Request-scoped context via ContextVar.

Provides ``request_var``: the ``RequestContext`` of the request being
dispatched. The dispatcher sets it around the controller call and resets
it afterwards, so flags and parameters never outlive their request.

Accessing it outside a dispatch raises ``LookupError``.
"""

from contextvars import ContextVar

from roost.routing.parse import RequestContext

request_var: ContextVar[RequestContext] = ContextVar("roost_request")
"""The current request context. Set by ``Dispatcher.run()``."""


def get_request() -> RequestContext:
    """Return the current request context.

    Raises ``LookupError`` if called outside a dispatch.
    """
    return request_var.get()
