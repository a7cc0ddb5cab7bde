"""Access to the server's shared adapters from inside a tool call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

if TYPE_CHECKING:
    from mvn_search.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Return the AppContext that app_lifespan yielded for this server.

    A tool invoked on a server started without app_lifespan has no
    repository to query; that is reported as a TypeError naming the
    unexpected object.
    """
    from mvn_search.server import AppContext

    lifespan_context = ctx.request_context.lifespan_context
    if isinstance(lifespan_context, AppContext):
        return lifespan_context
    raise TypeError(
        f"Expected AppContext in lifespan_context, got {type(lifespan_context).__name__}; "
        "start the server with lifespan=app_lifespan."
    )
