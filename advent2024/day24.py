"""Day 24: simulating a circuit of logic gates."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .helpers import micros, read_stdin, timed


class Gate(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, a: int, b: int) -> int:
        if self is Gate.AND:
            return a & b
        if self is Gate.OR:
            return a | b
        return a ^ b


@dataclass(frozen=True)
class Connection:
    """A gate reading wires a and b and driving the output wire."""

    a: str
    b: str
    gate: Gate
    output: str


_Z_PREFIXES = ("x", "y", "z")


@dataclass
class Device:
    """Initial wire values and the gates connecting wires."""

    inputs: dict[str, int] = field(default_factory=dict)
    connections: list[Connection] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> Device:
        wires, sep, gates = text.partition("\n\n")
        if not sep:
            raise ValueError("missing blank line between wires and gates")

        inputs: dict[str, int] = {}
        for line in wires.splitlines():
            name, found, value = line.strip().partition(": ")
            if found:
                inputs[name] = int(value)

        connections = []
        for line in gates.splitlines():
            words = line.split()
            if len(words) < 5:
                continue
            a, gate_name, b, _, output = words[:5]
            try:
                gate = Gate(gate_name)
            except ValueError:
                raise ValueError(f"Unexpected gate: {gate_name}") from None
            connections.append(Connection(a, b, gate, output))

        return cls(inputs, connections)

    def run(self) -> list[tuple[str, int]]:
        """Every wire's value once all gates have fired."""
        values = dict(self.inputs)
        pending = list(self.connections)
        while pending:
            remaining = []
            for conn in pending:
                if conn.a in values and conn.b in values:
                    values[conn.output] = conn.gate.apply(values[conn.a], values[conn.b])
                else:
                    remaining.append(conn)
            if len(remaining) == len(pending):
                raise ValueError("some gates never receive both inputs")
            pending = remaining
        return list(values.items())

    def get_swaps(self) -> list[str]:
        """Sorted outputs that break the structure of a ripple-carry adder."""
        z_outputs = [c.output for c in self.connections if c.output.startswith("z")]
        if not z_outputs:
            raise ValueError("no gate drives a z wire")
        max_z = max(z_outputs)
        incorrect: set[str] = set()

        for cmd in self.connections:
            if cmd.output.startswith("z") and cmd.gate is not Gate.XOR and cmd.output != max_z:
                incorrect.add(cmd.output)
            elif (
                cmd.gate is Gate.XOR
                and not cmd.a.startswith(_Z_PREFIXES)
                and not cmd.b.startswith(_Z_PREFIXES)
                and not cmd.output.startswith(_Z_PREFIXES)
            ):
                incorrect.add(cmd.output)
            elif cmd.gate is Gate.AND and cmd.a != "x00" and cmd.b != "x00":
                if any(
                    cmd.output in (c2.a, c2.b) and c2.gate is not Gate.OR
                    for c2 in self.connections
                ):
                    incorrect.add(cmd.output)
            elif cmd.gate is Gate.XOR:
                if any(
                    cmd.output in (c2.a, c2.b) and c2.gate is Gate.OR
                    for c2 in self.connections
                ):
                    incorrect.add(cmd.output)

        return sorted(incorrect)


def combine(data: Iterable[tuple[str, int]], prefix: str) -> int:
    """Number whose bit n is the value of wire <prefix>n."""
    result = 0
    for name, value in sorted((item for item in data if item[0].startswith(prefix)), key=lambda item: item[0]):
        result |= value << int(name[1:])
    return result


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Simulate a gate circuit read from stdin.").parse_args(argv)
    device = Device.from_text(read_stdin())

    elapsed, result = timed(lambda: combine(device.run(), "z"))
    print(f"Part 1: {result} in {micros(elapsed)}μs")

    elapsed, swaps = timed(lambda: ",".join(device.get_swaps()))
    print(f"Part 2: {swaps} in {micros(elapsed)}μs")