import argparse
import enum
import logging
import sys

from picdisasm.arch import Architecture, DEFAULT_ARCH_NAME
from picdisasm.errors import PicDisasmError
from picdisasm.files import FileType
from picdisasm.job import RawOptions, resolve, create_job
from picdisasm.options import LiteralBase
from picdisasm.version import __version__


EXIT_SUCCESS = 0
EXIT_FAILURE = 1

HELP_HINT = 'See --help for supported options, architectures and file types.'


logger = logging.getLogger(__name__)


class JobState(enum.Enum):
    START = enum.auto()
    PARSING_ARGS = enum.auto()
    RESOLVING = enum.auto()
    DISPATCHING = enum.auto()
    RUNNING = enum.auto()
    TERMINATED = enum.auto()


class StderrHelpAction(argparse.Action):
    """Like argparse's help action, but prints to stderr."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit()


class StderrVersionAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stderr.write(f'{parser.prog} version {__version__}\n')
        parser.exit()


def supported_epilog():
    lines = ['Supported 8-bit PIC architectures:']
    for arch in Architecture.all():
        default = ' (default)' if arch.name == DEFAULT_ARCH_NAME else ''
        lines.append(f'  {arch.description:<24}{arch.name}{default}')
    lines.append('')
    lines.append('Supported file types:')
    for file_type in FileType.all():
        lines.append(f'  {file_type.description:<24}{file_type.name}')
        extensions = ', '.join('.' + ext for ext in file_type.extensions)
        lines.append(f'    auto-recognized with {extensions} file extensions')
    return '\n'.join(lines)


def create_parser():
    parser = argparse.ArgumentParser(
        description='Disassemble an 8-bit PIC program file.',
        epilog=supported_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False
    )
    parser.add_argument('-a', '--arch', metavar='<architecture>', help='8-bit PIC architecture to disassemble for')
    parser.add_argument('-t', '--file-type', metavar='<type>', help='file type of the program file (default: by extension)')
    parser.add_argument('-l', '--address-label', metavar='<prefix>', help='create address labels with the given prefix')
    parser.add_argument('--no-addresses', action='store_true', help='do not display the address alongside disassembly')
    parser.add_argument('--no-destination-comments', action='store_true',
        help='do not display the destination address comments of relative branches')
    parser.add_argument('--literal-hex', dest='literal_base', action='store_const', const=LiteralBase.HEX,
        help='represent literals in hexadecimal (default)')
    parser.add_argument('--literal-bin', dest='literal_base', action='store_const', const=LiteralBase.BIN,
        help='represent literals in binary')
    parser.add_argument('--literal-dec', dest='literal_base', action='store_const', const=LiteralBase.DEC,
        help='represent literals in decimal')
    parser.add_argument('--literal-ascii', action='store_true', help='show the ASCII value of literal operands in a comment')
    parser.add_argument('-h', '--help', action=StderrHelpAction, help='display this usage/help')
    parser.add_argument('-v', '--version', action=StderrVersionAction, help='display the program version')
    parser.add_argument('input_file', nargs='?', metavar='file', help='program file to disassemble')
    return parser


class JobDriver:
    """Runs one disassembly job from command line arguments to exit status."""

    def __init__(self, output=None):
        """`output` - Listing sink (default stdout)."""
        self.output = output
        self.state = JobState.START
        self.job = None
        self.result = None

    def parse_args(self, argv=None) -> RawOptions:
        """Parse arguments. argparse itself exits on unknown flags, --help and --version."""
        return create_parser().parse_args(argv, namespace=RawOptions())

    def run(self, argv=None) -> int:
        """Run the job and return the exit status."""
        output = self.output if self.output is not None else sys.stdout
        try:
            self._enter(JobState.PARSING_ARGS)
            raw = self.parse_args(argv)

            self._enter(JobState.RESOLVING)
            arch, file_type, options = resolve(raw)

            self._enter(JobState.DISPATCHING)
            self.job = create_job(arch, file_type, options, raw.input_file, output)

            self._enter(JobState.RUNNING)
            self.result = self.job.run()
        except PicDisasmError as e:
            self._report(e)
            return EXIT_FAILURE
        finally:
            self._enter(JobState.TERMINATED)
        return EXIT_SUCCESS

    def _enter(self, state):
        logger.debug(f'{self.state.name} -> {state.name}')
        self.state = state

    def _report(self, error: PicDisasmError):
        print(f'Error: {error}', file=sys.stderr)
        if error.hint:
            print(HELP_HINT, file=sys.stderr)


def main():
    sys.exit(JobDriver().run())


if __name__ == '__main__':
    main()
