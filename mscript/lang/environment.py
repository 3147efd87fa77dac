"""Variable bindings for one program run."""

from mscript.lang.error import ScriptRuntimeError


class Environment:
    """Maps variable names to the (unevaluated) Values assigned to them. There is no scoping: one Environment lives
    for the duration of one run and is then discarded.
    """

    def __init__(self, variables=None):
        self.variables = dict(variables) if variables else {}

    def assign(self, name, value):
        """Binds name to value, replacing any earlier binding."""
        self.variables[name] = value

    def lookup(self, name):
        """Returns the Value bound to name. Raises ScriptRuntimeError if name was never assigned."""
        try:
            return self.variables[name]
        except KeyError:
            raise ScriptRuntimeError(f"undefined variable '{name}'") from None

    def __contains__(self, name):
        return name in self.variables

    def __iter__(self):
        return iter(self.variables)

    def __len__(self):
        return len(self.variables)

    def __repr__(self):
        bindings = ", ".join(f"{name}={value}" for name, value in self.variables.items())
        return f"Environment({bindings})"
