"""Global pytest configuration and fixtures.

The shared scenario is a module ``m`` with a clock, a reset and three
regular ports split over the ``foo`` and ``bar`` groups.
"""

import json

import pytest

from bsvwrap.config import WrapperConfig
from bsvwrap.netlist.data import Design, Direction, Module, Port


def _bits(start, width):
    return list(range(start, start + width))


@pytest.fixture
def scenario_module():
    return Module(
        name="m",
        ports=[
            Port("clk", Direction.INPUT, 1),
            Port("rst", Direction.INPUT, 1),
            Port("foo_data", Direction.INPUT, 8),
            Port("foo_valid", Direction.OUTPUT, 1),
            Port("bar_en", Direction.INPUT, 1),
        ],
    )


@pytest.fixture
def counter_module():
    return Module(
        name="counter",
        ports=[
            Port("clk", Direction.INPUT, 1),
            Port("rst", Direction.INPUT, 1),
            Port("foo_count", Direction.OUTPUT, 4),
            Port("en", Direction.INPUT, 1),
        ],
    )


@pytest.fixture
def scenario_config():
    return WrapperConfig(clocks=["clk"], resets=["rst"], groups=["foo", "bar"], interface="Top")


@pytest.fixture
def scenario_design(scenario_module, counter_module):
    return Design(modules=[scenario_module, counter_module])


@pytest.fixture
def yosys_netlist_data():
    """Yosys write_json output for the scenario design."""
    return {
        "creator": "Yosys 0.38 (git sha1 543faed9c8c)",
        "modules": {
            "m": {
                "attributes": {
                    "top": "00000000000000000000000000000001",
                    "src": "m.v:1.1-12.10",
                },
                "ports": {
                    "clk": {"direction": "input", "bits": _bits(2, 1)},
                    "rst": {"direction": "input", "bits": _bits(3, 1)},
                    "foo_data": {"direction": "input", "bits": _bits(4, 8)},
                    "foo_valid": {"direction": "output", "bits": _bits(12, 1)},
                    "bar_en": {"direction": "input", "bits": _bits(13, 1)},
                },
                "cells": {},
                "netnames": {},
            },
            "counter": {
                "attributes": {"src": "counter.v:1.1-9.10"},
                "ports": {
                    "clk": {"direction": "input", "bits": _bits(2, 1)},
                    "rst": {"direction": "input", "bits": _bits(3, 1)},
                    "foo_count": {"direction": "output", "bits": _bits(4, 4)},
                    "en": {"direction": "input", "bits": _bits(8, 1)},
                },
                "cells": {},
                "netnames": {},
            },
        },
    }


@pytest.fixture
def yosys_netlist(tmp_path, yosys_netlist_data):
    path = tmp_path / "design.json"
    path.write_text(json.dumps(yosys_netlist_data, indent=2))
    return path


# Expected wrapper for the scenario module ``m`` under scenario_config.
EXPECTED_M_WRAPPER = """\
(* always_ready, always_enabled *)
interface Bar;
   method Action en(Bit#(1) v);
endinterface
(* always_ready, always_enabled *)
interface Foo;
   method Action data(Bit#(8) v);
   method Bit#(1) valid();
endinterface
(* always_ready, always_enabled *)
interface Top;
    interface Bar bar;
    interface Foo foo;
endinterface
import "BVI" m =
module mkTop#(Clock clk, Reset rst)(Top);
    input_clock clk() = clk;
    input_reset rst() = rst;
    interface Bar bar;
        method en(en) enable((*in_high*) EN_en);
    endinterface
    interface Foo foo;
        method data(data) enable((*in_high*) EN_data);
        method valid valid();
    endinterface
    schedule(
        data,
        valid,
        en
    ) CF (
        data,
        valid,
        en
    );
endmodule
"""


@pytest.fixture
def expected_m_wrapper():
    return EXPECTED_M_WRAPPER
