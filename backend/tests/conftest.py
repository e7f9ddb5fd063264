import os

import pytest

# Tests start with auth enabled and no extra public paths
os.environ.pop("APIKEY_AUTH_NO_AUTH", None)
os.environ.pop("APIKEY_AUTH_PUBLIC_PATHS", None)
os.environ.pop("APIKEY_AUTH_PROTECTED_PREFIX", None)


@pytest.fixture
def anyio_backend():
    return "asyncio"
