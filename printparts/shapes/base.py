"""Common base for generators that emit pythonopenscad trees."""


class ScadPart:
    """A parametric solid built directly as a pythonopenscad tree.

    Subclasses take their parameters in ``__init__`` and return the solid
    from ``build()``.
    """

    def build(self):
        raise NotImplementedError

    def write_scad(self, path: str):
        model = self.build()
        with open(path, "w") as f:
            f.write(model.dumps())
