import bincopy

from picdisasm.errors import DecodeError
from ..format import FileType
from ..image import ProgramImage


class SRecordFormat(FileType):
    """Motorola S-Record. Addresses are byte addresses."""

    def parse_fileobj(self, fileobj) -> ProgramImage:
        binfile = bincopy.BinFile()
        try:
            binfile.add_srec(self._read_text(fileobj))
        except (bincopy.Error, ValueError) as e:
            raise DecodeError(f'Malformed Motorola S-Record file: {e}') from e
        return ProgramImage.from_binfile(self, binfile)

    def build_fileobj(self, image, fileobj):
        fileobj.write(image.to_binfile().as_srec().encode('UTF-8'))


FORMAT_SREC = SRecordFormat(
    name='srecord',
    description='Motorola S-Record',
    extensions=['srec', 'sre']
)
