import pytest


@pytest.fixture(scope="function", autouse=True)
def set_up():
    import dociopts

    dociopts.clean_options()
