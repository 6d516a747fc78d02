#!/usr/bin/env python3
"""Demonstra um trabalhador que alterna entre descanso e trabalho.

Uso:
    python scripts/worker_demo.py --counter 5 --log-level DEBUG

O trabalhador só aceita `work` enquanto o contador for positivo; depois
disso o evento cai na auto-transição que apenas imprime uma mensagem.
"""

from __future__ import annotations

import argparse

from config.logging import configure_logging
from fsm import DefinitionBuilder, FSMHost


def build_worker_definition():
    builder = DefinitionBuilder("worker")
    builder.declare_state("resting", enter="do_nothing")
    builder.declare_state("working", enter="check_in", exit="check_out")
    builder.declare_transitions(
        "resting",
        {"event": "work", "guard": "check_counter", "new": "working"},
        {"event": "work", "action": "print_msg", "new": None},
    )
    builder.declare_transitions("working", {"event": "rest", "new": "resting"})
    return builder.build()


class Worker(FSMHost):
    fsm_definition = build_worker_definition()

    def __init__(self, counter: int) -> None:
        self.counter = counter

    def do_nothing(self, args) -> None:
        print("I'm resting.")

    def print_msg(self, args) -> None:
        print(f"I've already worked enough. In state {self.state}.")

    def check_counter(self, args) -> bool:
        return self.counter > 0

    def check_in(self, args) -> None:
        print(f"OK. I'm working now. ({self.counter})")
        if args:
            print(f"My tool: {', '.join(map(str, args))}")
        self.counter -= 1

    def check_out(self, args) -> None:
        print("Hurray! End of my shift.")
        print(" --------------------")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Demo da FSM de um trabalhador")
    parser.add_argument("--counter", type=int, default=5, help="Turnos disponíveis")
    parser.add_argument("--log-level", default="WARNING", help="Nível de log JSON")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(level=args.log_level, service_name="worker_demo")

    joe = Worker(counter=args.counter)
    joe.run()
    joe.fire("work", "hammer")
    joe.fire("rest")
    joe.fire("work", "drill", "hammer")
    joe.fire("rest")
    for _ in range(args.counter):
        joe.fire("work")
        joe.fire("rest")
    joe.fire("work")


if __name__ == "__main__":
    main()
