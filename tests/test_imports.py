import importlib
import pytest


@pytest.mark.parametrize("module", [
    "genkmeans",
    "genkmeans.algorithms",
    "genkmeans.base",
    "genkmeans.distances",
    "genkmeans.updates",
    "genkmeans.initialization",
    "genkmeans.strategies",
    "genkmeans.utils",
    "genkmeans.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None


def test_public_api_names():
    import genkmeans

    for name in genkmeans.__all__:
        assert hasattr(genkmeans, name), f"genkmeans.{name} should exist"
