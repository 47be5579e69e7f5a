import bincopy

from picdisasm.errors import DecodeError
from ..format import FileType
from ..image import ProgramImage


class IHEXFormat(FileType):
    """Intel HEX. Addresses are byte addresses."""

    def parse_fileobj(self, fileobj) -> ProgramImage:
        binfile = bincopy.BinFile()
        try:
            binfile.add_ihex(self._read_text(fileobj))
        except (bincopy.Error, ValueError) as e:
            raise DecodeError(f'Malformed Intel HEX file: {e}') from e
        return ProgramImage.from_binfile(self, binfile)

    def build_fileobj(self, image, fileobj):
        fileobj.write(image.to_binfile().as_ihex().encode('UTF-8'))


FORMAT_IHEX = IHEXFormat(
    name='ihex',
    description='Intel HEX',
    extensions=['hex', 'ihex', 'ihx']
)
