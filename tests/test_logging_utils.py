import logging

import numpy as np

from geoprim import Line, Point, get_intersect
from geoprim.logging_utils import _safe_repr, apply_debug_logging, debug_log_call


def test_safe_repr_uses_text_form_of_primitives():
    assert _safe_repr(Point(1, 2)) == '[1, 2]'
    assert _safe_repr((Point(0, 0), Point(1, 1))) == '([0, 0], [1, 1])'


def test_safe_repr_summarises_arrays():
    assert _safe_repr(np.zeros((2, 3))) == 'ndarray(shape=(2, 3), dtype=float64)'


def test_safe_repr_truncates_long_sequences():
    assert _safe_repr(list(range(10))) == '[0, 1, 2, 3, 4, 5, ...]'


def test_engine_calls_are_traced(caplog):
    with caplog.at_level(logging.DEBUG, logger='geoprim.intersect'):
        get_intersect(Point(2, 2), Line(Point(0, 0), Point(1, 1)))

    assert 'Entering get_intersect' in caplog.text
    assert 'Exiting _point_linear -> [2, 2]' not in caplog.text
    assert 'Exiting get_intersect -> [2, 2]' in caplog.text


def test_tracing_is_silent_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger='geoprim.intersect'):
        get_intersect(Point(2, 2), Point(2, 2))

    assert caplog.records == []


def test_decorator_logs_exceptions(caplog):
    logger = logging.getLogger('geoprim.tests.tracing')

    @debug_log_call(logger)
    def explode():
        raise ValueError('boom')

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        try:
            explode()
        except ValueError:
            pass

    assert 'Exception in' in caplog.text
    assert 'boom' in caplog.text


def test_apply_debug_logging_wraps_module_functions_once():
    def helper(x):
        return x + 1

    helper.__module__ = 'fake_module'
    namespace = {'__name__': 'fake_module', 'helper': helper, 'skipped': helper}

    apply_debug_logging(namespace, skip={'skipped'})
    wrapped = namespace['helper']
    apply_debug_logging(namespace, skip={'skipped'})

    assert wrapped is not helper
    assert namespace['helper'] is wrapped
    assert namespace['skipped'] is helper
    assert wrapped(1) == 2
