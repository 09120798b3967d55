class BuildError(Exception):
    """Base class for errors raised while reading Build engine files."""
    pass

class ReadError(BuildError):
    """The source failed or ended before a fixed-size field was complete."""
    pass

class FormatError(BuildError):
    """The bytes were read but the header does not describe a valid file."""
    pass

class VersionError(FormatError):
    def __init__(self, version, expected):
        FormatError.__init__(self, "unsupported version %d, expected %d" % (version, expected))
        self.version = version
        self.expected = expected
