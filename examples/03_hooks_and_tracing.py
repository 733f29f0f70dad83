"""
Hooks and tracing example.

Demonstrates:
- Pre-processing with BeforeRequest (rejecting requests early)
- Audit logging with AfterComplete
- Debug traces of each dispatch stage
"""

import logging

from front_controller import (
    AfterComplete,
    BeforeRequest,
    DispatchContext,
    MalformedRequest,
    create_app,
)

logging.basicConfig(level=logging.INFO)
audit_log = logging.getLogger("example.audit")


async def require_client(ctx: DispatchContext) -> None:
    """Every request must say who it comes from."""
    if "client" not in ctx.request.params:
        raise MalformedRequest("Missing 'client' parameter")


async def audit(ctx: DispatchContext) -> None:
    trace = ctx.state["trace"]
    stages = ", ".join(f"{e.stage.value}={e.duration_ms:.2f}ms" for e in trace.entries)
    status = ctx.output.status_code if ctx.output else None
    audit_log.info("%s -> %s (%s)", ctx.request.path, status, stages)


# debug=True installs the TraceRecorder ahead of these hooks
app = create_app(
    hooks=[BeforeRequest(require_client), AfterComplete(audit)],
    debug=True,
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl "http://localhost:8000/user?client=cli"  -> 200, trace logged
    # curl http://localhost:8000/user               -> 400 Missing 'client' parameter
