from movienight.limiter import limiter
from movienight.main import app


def test_limits_are_declared_per_endpoint_only():
    # No SlowAPIMiddleware is installed, so a global default would never apply
    assert limiter._default_limits == []
    assert app.state.limiter is limiter
