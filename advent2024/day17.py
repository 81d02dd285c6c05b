"""Day 17: a three-bit computer and the search for a self-printing input."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .helpers import micros, read_stdin, timed

MAX_STEPS = 1_000_000


class _Opcode(IntEnum):
    ADV = 0  # A := A >> combo
    BXL = 1  # B := B ^ literal
    BST = 2  # B := combo % 8
    JNZ = 3  # jump to literal when A != 0
    BXC = 4  # B := B ^ C
    OUT = 5  # output combo % 8
    BDV = 6  # B := A >> combo
    CDV = 7  # C := A >> combo


def _opcode(value: int) -> _Opcode:
    try:
        return _Opcode(value)
    except ValueError:
        raise ValueError(f"Unexpected opcode: {value}") from None


@dataclass
class Registers:
    a: int = 0
    b: int = 0
    c: int = 0


def _combo(operand: int, registers: Registers) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return registers.a
    if operand == 5:
        return registers.b
    if operand == 6:
        return registers.c
    if operand == 7:
        raise ValueError("reserved operand")
    raise ValueError(f"Unexpected operand: {operand}")


@dataclass
class Machine:
    """Program counter, output so far and registers of the computer."""

    pc: int = 0
    output: list[int] = field(default_factory=list)
    registers: Registers = field(default_factory=Registers)

    def step(self, program: Sequence[int]) -> Machine:
        """Execute the instruction at the program counter, in place."""
        opcode = _opcode(program[self.pc])
        operand = program[self.pc + 1]
        regs = self.registers

        if opcode is _Opcode.ADV:
            regs.a >>= _combo(operand, regs)
        elif opcode is _Opcode.BXL:
            regs.b ^= operand
        elif opcode is _Opcode.BST:
            regs.b = _combo(operand, regs) % 8
        elif opcode is _Opcode.JNZ:
            if regs.a != 0:
                self.pc = operand
                return self
        elif opcode is _Opcode.BXC:
            regs.b ^= regs.c
        elif opcode is _Opcode.OUT:
            self.output.append(_combo(operand, regs) % 8)
        elif opcode is _Opcode.BDV:
            regs.b = regs.a >> _combo(operand, regs)
        else:
            regs.c = regs.a >> _combo(operand, regs)

        self.pc += 2
        return self

    def run(self, program: Sequence[int]) -> Machine:
        """Step until the program counter leaves the program."""
        steps = 0
        while self.pc < len(program):
            self.step(program)
            steps += 1
            if steps == MAX_STEPS:
                raise RuntimeError("inf loop")
        return self


def _after_colon(line: str) -> str:
    _, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in line {line!r}")
    return rest.strip()


def parse_input(text: str) -> tuple[Machine, list[int]]:
    """Three register lines, a blank line, then the program line."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("input needs three registers, a blank line and a program")
    a, b, c = (int(_after_colon(line)) for line in lines[:3])
    program = [int(x) for x in _after_colon(lines[4]).split(",")]
    return Machine(registers=Registers(a, b, c)), program


def join_output(output: Sequence[int]) -> str:
    return ",".join(str(x) for x in output)


def run_hardcoded(a: int) -> list[int]:
    """The puzzle program 2,4,1,1,7,5,1,5,4,0,0,3,5,5,3,0 run natively."""
    output = []
    while a != 0:
        b = (a & 0b111) ^ 1
        c = a >> b
        b ^= 5
        b ^= c
        a >>= 3
        output.append(b & 0b111)
    return output


def find_output(expected: Sequence[int]) -> int:
    """Smallest A found, three bits at a time, that makes the program print itself."""
    expected = list(expected)
    a = 0
    shift = 0

    while True:
        for i in range(8):
            candidate = a + i
            output = run_hardcoded(candidate)
            if not output:
                continue
            if output == expected:
                return candidate
            out_index = len(output) - shift - 1
            exp_index = len(expected) - shift - 1
            if out_index < 0 or exp_index < 0:
                raise IndexError("search ran past the end of the output")
            if output[out_index] == expected[exp_index]:
                a = (a + i) << 3
                shift += 1
                break
        else:
            # The digit-by-digit search can miss the final value; finish by brute force.
            for i in range(1001):
                if run_hardcoded(a + i) == expected:
                    return a + i
            raise LookupError("none found")


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Run a three-bit program read from stdin.").parse_args(argv)
    machine, program = parse_input(read_stdin())

    elapsed, output = timed(lambda: join_output(machine.run(program).output))
    print(f"Part 1: {output} in {micros(elapsed)}μs")

    elapsed, value = timed(lambda: find_output(program))
    print(f"Part 2: {value} in {micros(elapsed)}μs")