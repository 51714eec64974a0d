"""A table of shell variables, some of them marked for export."""

from dataclasses import dataclass

MAXVARS = 200


@dataclass
class _Var:
    value: str
    exported: bool = False


class VarTable:
    """Name=value storage with an export flag per variable.

    The table holds at most MAXVARS variables; adding one more raises
    OverflowError.
    """

    def __init__(self):
        self._vars = {}

    def __len__(self):
        return len(self._vars)

    def __contains__(self, name):
        return name in self._vars

    def _slot_for(self, name):
        if name not in self._vars and len(self._vars) >= MAXVARS:
            raise OverflowError("variable table is full")

    def store(self, name, value):
        """Set name to value, replacing any earlier value."""
        self._slot_for(name)
        var = self._vars.get(name)
        if var is None:
            self._vars[name] = _Var(value)
        else:
            var.value = value

    def lookup(self, name):
        """Return the value of name, or an empty string if it is not set."""
        var = self._vars.get(name)
        return "" if var is None else var.value

    def export(self, name):
        """Mark name for export, adding it with an empty value if absent."""
        if name not in self._vars:
            self.store(name, "")
        self._vars[name].exported = True

    def listing(self):
        """Return one line per variable, exported ones marked with '*'."""
        return [
            f"  * {name}={var.value}" if var.exported else f"    {name}={var.value}"
            for name, var in self._vars.items()
        ]

    def load_environ(self, env):
        """Replace the table with an environment, every variable exported.

        env is a mapping or an iterable of "name=value" strings; strings
        without '=' are skipped.
        """
        items = env.items() if hasattr(env, "items") else (
            tuple(entry.split("=", 1)) for entry in env if "=" in entry
        )
        loaded = {}
        for name, value in items:
            if name not in loaded and len(loaded) >= MAXVARS:
                raise OverflowError("variable table is full")
            loaded[name] = _Var(value, exported=True)
        self._vars = loaded

    def to_environ(self):
        """Return the exported variables as a dict for a child process."""
        return {
            name: var.value for name, var in self._vars.items() if var.exported
        }