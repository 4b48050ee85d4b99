import unittest

from _pytest.unittest import UnitTestCase


def pytest_pycollect_makeitem(collector, name, obj):
    """Expand testscenarios ``scenarios`` into one test class per scenario.

    pytest does not use testscenarios' ``load_tests`` hook, so without this
    the scenario attributes are never applied.
    """
    if not (isinstance(obj, type) and issubclass(obj, unittest.TestCase)):
        return None
    scenarios = getattr(obj, 'scenarios', None)
    if not scenarios:
        return None
    items = []
    for scenario_name, attrs in scenarios:
        cls_name = '{0}[{1}]'.format(name, scenario_name)
        cls = type(cls_name, (obj,), dict(attrs, scenarios=None))
        cls.__module__ = obj.__module__
        setattr(collector.obj, cls_name, cls)
        items.append(UnitTestCase.from_parent(collector, name=cls_name))
    return items
