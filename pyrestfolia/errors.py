"""\
Exceptions raised while building a resource graph.

"""


class InvalidArgument(ValueError):
    """Resource can only be built from a JSON object."""

    def __init__(self, value):
        super().__init__(
            'json parameter has to be a mapping, got {}'.format(
                type(value).__name__))
        self.value = value


class InvalidLink(ValueError):
    """Link needs both href and rel."""

    def __init__(self, link):
        super().__init__('Invalid link: {!r}'.format(link))
        self.link = link


class UnknownAttribute(AttributeError):
    """Resource has no attribute of that name."""

    def __init__(self, name):
        super().__init__(
            'Resource has no attribute {!r}'.format(name))
        self.name = name
