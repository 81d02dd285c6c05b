import pytest

from advent2024.day17 import (
    Machine,
    Registers,
    find_output,
    join_output,
    parse_input,
    run_hardcoded,
)

PUZZLE_PROGRAM = [2, 4, 1, 1, 7, 5, 1, 5, 4, 0, 0, 3, 5, 5, 3, 0]


def test_bst_from_c():
    m = Machine(registers=Registers(c=9)).run([2, 6])
    assert m.registers.b == 1


def test_out_literals_and_register():
    m = Machine(registers=Registers(a=10)).run([5, 0, 5, 1, 5, 4])
    assert m.output == [0, 1, 2]


def test_loop_program():
    m = Machine(registers=Registers(a=2024)).run([0, 1, 5, 4, 3, 0])
    assert m.output == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert m.registers.a == 0


def test_bxl():
    m = Machine(registers=Registers(b=29)).run([1, 7])
    assert m.registers.b == 26


def test_bxc():
    m = Machine(registers=Registers(b=2024, c=43690)).run([4, 0])
    assert m.registers.b == 44354


def test_example_program():
    m = Machine(registers=Registers(a=729)).run([0, 1, 5, 4, 3, 0])
    assert m.output == [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_parse_input_and_run():
    text = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"
    machine, program = parse_input(text)
    assert machine.registers == Registers(729, 0, 0)
    assert program == [0, 1, 5, 4, 3, 0]
    assert join_output(machine.run(program).output) == "4,6,3,5,6,3,5,2,1,0"


def test_join_output():
    assert join_output([1, 2, 3]) == "1,2,3"
    assert join_output([]) == ""


def test_step_advances_pc():
    m = Machine(registers=Registers(b=1)).step([1, 2, 1, 2])
    assert m.pc == 2
    assert m.registers.b == 3


def test_unknown_opcode():
    with pytest.raises(ValueError):
        Machine().run([8, 0])


def test_reserved_operand():
    with pytest.raises(ValueError):
        Machine().run([5, 7])


def test_infinite_loop_detected():
    with pytest.raises(RuntimeError):
        Machine(registers=Registers(a=1)).run([3, 0])


def test_parse_input_too_short():
    with pytest.raises(ValueError):
        parse_input("Register A: 1\n")


def test_find_output_produces_quine():
    a = find_output(PUZZLE_PROGRAM)
    assert run_hardcoded(a) == PUZZLE_PROGRAM
    assert Machine(registers=Registers(a=a)).run(PUZZLE_PROGRAM).output == PUZZLE_PROGRAM