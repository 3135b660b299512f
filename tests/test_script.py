"""Test instruction parsing and execution."""

import pytest
from pydantic import ValidationError

from techdraw.diagram.engine import TechDrawEngine
from techdraw.errors import InstructionError
from techdraw.script import parse_script, run_script, strip_code_fences

DIVIDER = """
r1 = TechDraw.add('resistor', 'r1', {'x': -100, 'y': 0, 'label': '10k'})
r2 = TechDraw.add('resistor', 'r2', {'x': 100, 'y': 0, 'label': '4.7k'})
# wire them up
TechDraw.connect('r1', 'right', 'r2', 'left')
"""


def test_run_script():
    engine = TechDrawEngine()
    assert run_script(DIVIDER, engine) == 3
    assert engine.registry.ids() == ["r1", "r2"]
    assert engine.sink.primitives[0].attrs["d"] == "M -70 0 L 0 0 L 0 0 L 70 0"


def test_parse_script_does_not_execute():
    instructions = parse_script(DIVIDER)
    assert [i.operation for i in instructions] == ["add", "add", "connect"]
    assert instructions[0].args == ("resistor", "r1", {"x": -100, "y": 0, "label": "10k"})
    assert instructions[2].lineno == 4


def test_keyword_arguments():
    engine = TechDrawEngine()
    run_script(
        "TechDraw.add(component_type='gnd', component_id='g1', config={'x': 0, 'y': 0})\n"
        "TechDraw.add('source_v', 'v1', {'x': 0, 'y': -100})\n"
        "TechDraw.connect(from_id='v1', from_pin='bottom', to_id='g1', to_pin='top')\n",
        engine,
    )
    assert len(engine.sink.primitives) == 5


def test_code_fences_are_stripped():
    fenced = "```python\nTechDraw.add('gnd', 'g1', {'x': 0, 'y': 0})\n```"
    assert strip_code_fences(fenced) == "TechDraw.add('gnd', 'g1', {'x': 0, 'y': 0})"
    engine = TechDrawEngine()
    assert run_script(fenced, engine) == 1


def test_trailing_semicolons():
    engine = TechDrawEngine()
    assert run_script("TechDraw.add('gnd', 'g1', {'x': 0, 'y': 0});", engine) == 1


def test_empty_script():
    assert run_script("", TechDrawEngine()) == 0


@pytest.mark.parametrize("source", [
    "import os",
    "TechDraw.reset()",
    "TechDraw.get_export()",
    "__import__('os').system('true')",
    "os.add('resistor', 'r1', {'x': 0, 'y': 0})",
    "TechDraw.add('resistor', name, {'x': 0, 'y': 0})",
    "TechDraw.add('resistor', 'r1', {'x': 0, 'y': 0}, **extra)",
    "x = 1",
    "TechDraw.engine.add('resistor', 'r1', {})",
    "for i in range(3): TechDraw.add('gnd', 'g', {'x': 0, 'y': 0})",
    "const r1 = TechDraw.add('resistor', 'r1', {x: 0, y: 0});",
])
def test_forbidden_constructs(source):
    with pytest.raises(InstructionError):
        parse_script(source)


def test_syntax_error_reports_line():
    with pytest.raises(InstructionError) as exc:
        parse_script("TechDraw.add('gnd', 'g1', {'x': 0, 'y': 0})\nTechDraw.add(")
    assert exc.value.lineno is not None
    assert str(exc.value).startswith("line ")


def test_nothing_runs_when_parsing_fails():
    engine = TechDrawEngine()
    with pytest.raises(InstructionError):
        run_script("TechDraw.add('gnd', 'g1', {'x': 0, 'y': 0})\nTechDraw.reset()", engine)
    assert len(engine.registry) == 0
    assert len(engine.sink) == 0


def test_runtime_error_keeps_earlier_drawing():
    engine = TechDrawEngine()
    with pytest.raises(ValidationError):
        run_script(
            "TechDraw.add('resistor', 'r1', {'x': 0, 'y': 0})\n"
            "TechDraw.add('resistor', 'r2', {'y': 0})\n",
            engine,
        )
    assert engine.registry.ids() == ["r1"]


def test_invalid_connect_is_not_an_error():
    engine = TechDrawEngine()
    assert run_script("TechDraw.connect('a', 'x', 'b', 'y')", engine) == 1
    assert len(engine.sink) == 0


def test_backticks_inside_labels_are_kept():
    engine = TechDrawEngine()
    run_script("TechDraw.add('resistor', 'r1', {'x': 0, 'y': 0, 'label': 'a```b'})", engine)
    assert engine.sink.primitives[0].children[-1].text == "a```b"


def test_only_whole_fence_lines_are_stripped():
    fenced = "  ```python-3  \nTechDraw.add('gnd', 'g1', {'x': 0, 'y': 0, 'label': '```js'})\n```\n"
    assert strip_code_fences(fenced) == "TechDraw.add('gnd', 'g1', {'x': 0, 'y': 0, 'label': '```js'})"
