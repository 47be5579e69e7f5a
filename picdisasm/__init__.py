import logging

from .arch import *
from .files import *
from .options import FormattingOptions, LiteralBase
from .disasm import Disassembler, DecodeResult
from .job import DisassemblyJob, RawOptions, resolve_job
from .errors import (PicDisasmError, NotFoundError, UnknownArchitectureError, UnknownFileTypeError,
    UnrecognizedExtensionError, NoInputFileError, CannotOpenInputError, InvalidOptionError, DecodeError,
    PicDisasmWarning, disable_warnings)
from .version import __version__


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
handler = logging.StreamHandler()
handler.setLevel(logging.DEBUG)
formatter = logging.Formatter('%(name)s: %(levelname)s: %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
