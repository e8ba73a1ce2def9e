import logging

import numpy as np
import pytest

from cosmos_layout.logging_utils import apply_debug_logging, debug_log_call, describe, safe_repr
from cosmos_layout.model import Branch, Connection, Forest


def test_safe_repr_summarises_arrays():
    small = safe_repr(np.array([1.0, 2.0]))
    assert "shape=(2,)" in small
    assert "values=[1.0, 2.0]" in small
    large = safe_repr(np.arange(100.0))
    assert "min=0" in large
    assert "max=99" in large


def test_safe_repr_truncates_layouts():
    edges = tuple(Connection(i, i + 1) for i in range(20))
    rendered = safe_repr(edges)
    assert rendered.startswith("(Connection(from_index=0, to_index=1)")
    assert "(20 total)" in rendered


def test_debug_log_call_traces_calls(caplog):
    logger = logging.getLogger("cosmos_layout.tests.trace")
    caplog.set_level(logging.DEBUG, logger=logger.name)

    @debug_log_call(logger)
    def add(a, b=1):
        return a + b

    assert add(2, b=3) == 5
    messages = [record.getMessage() for record in caplog.records]
    assert "Entering add (2, b=3)" in messages
    assert any(m.startswith("Exiting add after") and m.endswith("-> 5") for m in messages)


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger("cosmos_layout.tests.raise")
    caplog.set_level(logging.DEBUG, logger=logger.name)

    @debug_log_call(logger)
    def boom():
        raise ValueError("bad")

    with pytest.raises(ValueError):
        boom()
    assert any(record.getMessage() == "boom raised ValueError: bad" for record in caplog.records)


def test_apply_debug_logging_wraps_module_functions():
    def local():
        return 1

    local.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "local": local, "other": len}
    apply_debug_logging(namespace)
    assert getattr(namespace["local"], "_debug_logging_wrapped", False)
    assert namespace["other"] is len
    assert namespace["local"]() == 1


def test_network_module_is_traced():
    from cosmos_layout import network

    assert getattr(network.generate_nodes, "_debug_logging_wrapped", False)


def test_describe_collapses_layout_records():
    edges = tuple(Connection(i, i + 1) for i in range(12))
    assert describe(edges) == "12 Connection record(s)"
    branch = Branch(id="root-0-0", start_x=0, start_y=0, end_x=1, end_y=1, thickness=3, depth=0)
    assert describe(Forest(branches=(branch, branch), roots=())) == "Forest(branches=2, roots=0)"
    assert describe(()) == "()"
    assert describe(7) == "7"


def test_network_trace_reports_record_counts(caplog):
    from cosmos_layout import network

    caplog.set_level(logging.DEBUG, logger=network.logger.name)
    network.generate_nodes(6, seed=42)
    messages = [record.getMessage() for record in caplog.records]
    assert "Entering generate_nodes (6, seed=42)" in messages
    assert any(m.startswith("Exiting generate_nodes after") and m.endswith("-> 6 Neuron record(s)") for m in messages)
