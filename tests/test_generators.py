"""Tests for the interface, binding and schedule generators."""

import pytest

from bsvwrap.config import WrapperConfig
from bsvwrap.context import ModuleContext
from bsvwrap.errors import TemplateError
from bsvwrap.generators import (
    BindingGenerator,
    InterfaceGenerator,
    ScheduleGenerator,
    create_environment,
)
from bsvwrap.netlist.data import Direction, Module, Port


@pytest.fixture
def scenario_context(scenario_module, scenario_config):
    return ModuleContext.build(scenario_module, scenario_config)


class TestInterfaceGenerator:

    def test_group_blocks(self, scenario_context):
        text = InterfaceGenerator().render(scenario_context)
        assert (
            "interface Foo;\n"
            "   method Action data(Bit#(8) v);\n"
            "   method Bit#(1) valid();\n"
            "endinterface\n"
        ) in text
        assert "interface Bar;\n   method Action en(Bit#(1) v);\nendinterface\n" in text

    def test_every_block_is_always_ready(self, scenario_context):
        text = InterfaceGenerator().render(scenario_context)
        assert text.count("(* always_ready, always_enabled *)\n") == 3

    def test_aggregate_in_sorted_prefix_order(self, scenario_context):
        text = InterfaceGenerator().render(scenario_context)
        assert text.endswith(
            "interface Top;\n"
            "    interface Bar bar;\n"
            "    interface Foo foo;\n"
            "endinterface\n"
        )

    def test_no_groups_gives_empty_aggregate(self, scenario_module):
        config = WrapperConfig(clocks=["clk"], resets=["rst"], interface="top")
        text = InterfaceGenerator().render(ModuleContext.build(scenario_module, config))
        assert text == "(* always_ready, always_enabled *)\ninterface Top;\nendinterface\n"

    def test_inout_has_no_interface_method(self):
        module = Module("pad", [Port("io_pin", Direction.INOUT, 1)])
        config = WrapperConfig(groups=["io"], interface="Top")
        text = InterfaceGenerator().render(ModuleContext.build(module, config))
        assert "interface Io;\nendinterface\n" in text
        assert "pin" not in text


class TestBindingGenerator:

    def test_header_and_clock_reset_bindings(self, scenario_context):
        text = BindingGenerator().render(scenario_context)
        assert text.startswith(
            'import "BVI" m =\n'
            "module mkTop#(Clock clk, Reset rst)(Top);\n"
            "    input_clock clk() = clk;\n"
            "    input_reset rst() = rst;\n"
        )

    def test_group_block(self, scenario_context):
        text = BindingGenerator().render(scenario_context)
        assert (
            "    interface Foo foo;\n"
            "        method data(data) enable((*in_high*) EN_data);\n"
            "        method valid valid();\n"
            "    endinterface\n"
        ) in text

    def test_multiple_clocks_and_resets_keep_configuration_order(self):
        module = Module("m", [
            Port("clk_a", Direction.INPUT), Port("clk_b", Direction.INPUT),
            Port("rst_b", Direction.INPUT), Port("rst_a", Direction.INPUT),
        ])
        config = WrapperConfig(clocks=["clk_b", "clk_a"], resets=["rst_b", "rst_a"],
                               interface="Top")
        text = BindingGenerator().render(ModuleContext.build(module, config))
        assert "module mkTop#(Clock clk_b, Clock clk_a, Reset rst_b, Reset rst_a)(Top);\n" in text

    def test_no_clocks_or_resets_omits_parameter_list(self):
        module = Module("m", [Port("foo_a", Direction.OUTPUT, 2)])
        config = WrapperConfig(groups=["foo"], interface="Top")
        text = BindingGenerator().render(ModuleContext.build(module, config))
        assert "module mkTop(Top);\n" in text
        assert "input_clock" not in text

    def test_inout_binding(self):
        module = Module("pad", [Port("io_pin", Direction.INOUT, 1)])
        config = WrapperConfig(groups=["io"], interface="Top")
        text = BindingGenerator().render(ModuleContext.build(module, config))
        assert "    interface Io io;\n        inout pin;\n    endinterface\n" in text

    def test_wrapper_name_uses_interface_name_verbatim(self, scenario_module):
        config = WrapperConfig(clocks=["clk"], resets=["rst"], interface="top")
        text = BindingGenerator().render(ModuleContext.build(scenario_module, config))
        assert "module mktop#(Clock clk, Reset rst)(Top);\n" in text


class TestScheduleGenerator:

    def test_lists_regular_ports_twice(self, scenario_context):
        text = ScheduleGenerator().render(scenario_context)
        names = "        data,\n        valid,\n        en\n"
        assert text == f"    schedule(\n{names}    ) CF (\n{names}    );\n"

    def test_ungrouped_ports_still_scheduled(self, counter_module, scenario_config):
        text = ScheduleGenerator().render(ModuleContext.build(counter_module, scenario_config))
        assert "        count,\n        en\n" in text


class TestEnvironment:

    def test_missing_template_dir(self, tmp_path):
        with pytest.raises(TemplateError, match="not found"):
            create_environment(tmp_path / "nowhere")

    def test_custom_template_dir(self, tmp_path, scenario_context):
        (tmp_path / "schedule.bsv.j2").write_text("// {{ name_list | length }}\n")
        env = create_environment(tmp_path)
        assert ScheduleGenerator(env).render(scenario_context).startswith("// ")

    def test_missing_template_file(self, tmp_path, scenario_context):
        env = create_environment(tmp_path)
        with pytest.raises(TemplateError, match="interface.bsv.j2"):
            InterfaceGenerator(env).render(scenario_context)
