"""Minimal example layering an override tree onto defaults and encoding the result."""

import json

from nested_map import SymbolTable, diff, get, merge, normalize_keys_strict, put, remove, to_serializable


def main() -> None:
    """Merge defaults with overrides, inspect the change set and dump JSON."""
    defaults = {"listeners": {"tcp": {"bind": "0.0.0.0:1883", "acceptors": 16}}, "log": {"level": "warning"}}
    overrides = json.loads('{"listeners": {"tcp": {"acceptors": 32}}, "log": {"level": "debug"}}')

    conf = merge(defaults, overrides)
    conf = put(["listeners", "ssl", "bind"], conf, "0.0.0.0:8883")
    conf = remove(["log"], conf)
    print("acceptors:", get(["listeners", "tcp", "acceptors"], conf))
    print("ws bind:", get(["listeners", "ws", "bind"], conf, None))

    changes = diff(conf, defaults)
    print("added:", list(changes.added))
    print("removed:", list(changes.removed))
    print("changed:", list(changes.changed))

    symbols = SymbolTable(["listeners", "tcp", "ssl", "bind", "acceptors"])
    atom_conf = normalize_keys_strict(conf, symbols=symbols)
    print(json.dumps(to_serializable(atom_conf), indent=2))


if __name__ == "__main__":
    main()
