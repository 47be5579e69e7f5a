import io
from pathlib import Path

import pytest

from picdisasm import Architecture, FileType, ProgramImage, ImageSegment, FormattingOptions


FILES_DIR = Path(__file__).parent / 'files'

IHEX_PATH = FILES_DIR / 'sample.hex'   #mid-range program
SREC_PATH = FILES_DIR / 'sample.srec'  #enhanced mid-range program


def words_to_bytes(words):
    return b''.join(word.to_bytes(2, 'little') for word in words)


@pytest.fixture(params=list(Architecture.all()), ids=lambda a: a.name)
def arch(request):
    return request.param


@pytest.fixture(params=list(FileType.all()), ids=lambda f: f.name)
def file_type(request):
    return request.param


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def default_options():
    return FormattingOptions()


@pytest.fixture
def make_file(tmp_path):
    """Write program data to a container file and return its path."""
    def make(file_type, data, address=0, name=None):
        if name is None:
            name = f'prog.{file_type.extensions[0]}'
        path = tmp_path / name
        ProgramImage(file_type, [ImageSegment(address, data)]).build_file(path)
        return path
    return make
