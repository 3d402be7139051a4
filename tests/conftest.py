import pytest

from bufferline.infrastructure.workspace import Workspace


@pytest.fixture
def workspace():
    ws = Workspace()
    for name in ("alpha.py", "beta.py", "gamma.py", "delta.py", "epsilon.py"):
        ws.open_document(name)
    return ws
