from pprint import pprint

from pytest import fixture

from gridwalk.grid.coords import Pos


@fixture(autouse=True)
def add_doctest_imports(doctest_namespace):
    doctest_namespace["pprint"] = pprint
    doctest_namespace["Pos"] = Pos
