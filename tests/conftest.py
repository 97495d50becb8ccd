import sys

import pytest


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_sessionfinish(session):
    # pytest's tmp_path cleanup uses recursive shutil.rmtree, which overflows on
    # the deliberately deeper-than-recursion-limit tree built by the walker tests.
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, 20000))
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)
