from fastapi import FastAPI
from fastapi.testclient import TestClient

from ednc.core.rate_limit import create_limiter, install_rate_limiting


def build_app(limit: str, enabled: bool = True) -> FastAPI:
    app = FastAPI()
    install_rate_limiting(app, create_limiter(limit, enabled=enabled))

    @app.get("/ping")
    def ping():
        return {"ok": True}

    return app


def test_requests_over_limit_get_429():
    client = TestClient(build_app("2/minute"))

    codes = [client.get("/ping").status_code for _ in range(3)]

    assert codes == [200, 200, 429]


def test_disabled_limiter_lets_everything_through():
    client = TestClient(build_app("1/minute", enabled=False))

    assert all(client.get("/ping").status_code == 200 for _ in range(3))
