from typing import cast
from unittest.mock import MagicMock

import pytest

from slugstore.types import LambdaContext
from slugstore.dao.base import IdentityBaseDAO


@pytest.fixture
def context() -> LambdaContext:
    class _Context:
        function_name = 'slugstore'

    return cast(LambdaContext, _Context())


@pytest.fixture
def dao() -> IdentityBaseDAO:
    return cast(IdentityBaseDAO, MagicMock(spec=IdentityBaseDAO))
