import warnings



class PicDisasmError(Exception):
    """Base class for all custom exceptions."""

    hint = False #True for configuration errors that warrant pointing the user at --help

class NotFoundError(PicDisasmError):
    """Raised when a name is not found in a registry."""

    kind = 'entry'
    hint = True

    def __init__(self, token):
        self.token = token
        super().__init__(f'Unknown {self.kind} "{token}"')

class UnknownArchitectureError(NotFoundError):
    kind = '8-bit PIC architecture'

class UnknownFileTypeError(NotFoundError):
    kind = 'file type'

class UnrecognizedExtensionError(PicDisasmError):
    hint = True

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f'Unable to auto-recognize file type of "{filename}" by extension, specify it with -t/--file-type')

class NoInputFileError(PicDisasmError):
    hint = True

    def __init__(self):
        super().__init__('No program file specified')

class CannotOpenInputError(PicDisasmError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f'Cannot open program file "{path}" for disassembly: {reason}')

class InvalidOptionError(PicDisasmError):
    hint = True

class DecodeError(PicDisasmError):
    pass

class PicDisasmWarning(Warning):
    """Base class for all custom warnings."""
    pass

def disable_warnings():
    """Disable all picdisasm warnings."""
    warnings.simplefilter('ignore', PicDisasmWarning)


def warning(s):
    warnings.warn(s, PicDisasmWarning, stacklevel=2)
