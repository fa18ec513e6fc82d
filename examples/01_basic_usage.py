"""
Basic usage example of fastapi-request-context.

Demonstrates:
- Building a RequestContext per request with a FastAPI dependency
- Routing on the request chain and the requested format
- Reading merged query, header and body parameters
"""

from fastapi import Depends, FastAPI, HTTPException

from fastapi_request_context import RequestContext, request_context_dependency

app = FastAPI(title="Basic Request Context Example")

request_context = request_context_dependency(base_url="/api")

USERS = {"1": {"id": "1", "name": "Ann"}, "2": {"id": "2", "name": "Bob"}}


@app.api_route("/api/{path:path}", methods=["GET", "POST"])
async def dispatch(ctx: RequestContext = Depends(request_context)):
    """Tiny dispatcher walking ctx.request_chain."""
    if not ctx.method_allowed:
        raise HTTPException(status_code=405)
    if ctx.format != "json":
        raise HTTPException(status_code=406, detail=f"Unsupported format {ctx.format}")

    chain = ctx.request_chain
    if chain[:1] != ("users",):
        raise HTTPException(status_code=404)
    if len(chain) == 1:
        limit = int(ctx.get_parameter("limit", 10))
        return list(USERS.values())[:limit]
    user = USERS.get(chain[1])
    if user is None:
        raise HTTPException(status_code=404)
    return {**user, "debug": ctx.to_dict() if ctx.get_parameter("debug") else None}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/api/users.json?limit=1
    # curl http://localhost:8000/api/users/2?debug=1
    # curl http://localhost:8000/api/users/2.xml
