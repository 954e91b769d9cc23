"""
FastAPI integration example for twofactor.

Serves the two-factor settings and challenge page payloads.
"""

try:
    from fastapi import FastAPI, Request
    FASTAPI_AVAILABLE = True
except ImportError:
    FASTAPI_AVAILABLE = False

from twofactor import Features
from twofactor.integrations.fastapi import create_two_factor_router

if not FASTAPI_AVAILABLE:
    print("FastAPI is not installed. Install it with: pip install fastapi uvicorn")
    exit(1)

features = Features.of(Features.two_factor_authentication(confirm=True))

app = FastAPI(
    title="twofactor FastAPI Demo",
    description="Two-factor settings and challenge pages",
    version="1.0.0"
)


@app.middleware("http")
async def demo_session(request: Request, call_next):
    """Stand-in for real session middleware: any X-User header signs you in."""
    user = request.headers.get("X-User")
    if user:
        request.state.user = user
    return await call_next(request)


app.include_router(create_two_factor_router(features))


if __name__ == "__main__":
    import uvicorn

    print("=== twofactor FastAPI Integration Demo ===")
    print("   GET  /settings/two-factor   - Requires X-User header")
    print("   GET  /two-factor-challenge  - Public")
    print()
    uvicorn.run(app, host="0.0.0.0", port=8000)
