"""Errors surfaced by scene loading."""


class SceneLoadError(Exception):
    """Base class for every error raised by load_from_path / load_from_memory."""


class ParseFailure(SceneLoadError):
    """The asset parser rejected the input. No partial IR is produced."""

    def __init__(self, description):
        super().__init__(description)
        self.description = description


class ResourceFailure(SceneLoadError):
    """Copying native data into the IR failed (out of memory)."""


class NoParserError(SceneLoadError):
    """No parser was passed and no default parser is installed."""


class UnknownProfileError(SceneLoadError, KeyError):
    """A profile id was given that is not in the profile registry."""


class BakeFailure(Exception):
    """One animation stack could not be resampled.

    Never raised out of a load call: the stack is skipped and the failure
    is recorded on the assembler.
    """

    def __init__(self, stack_id, stack_name, description):
        super().__init__(f"animation stack {stack_id} ({stack_name!r}): {description}")
        self.stack_id = stack_id
        self.stack_name = stack_name
        self.description = description
