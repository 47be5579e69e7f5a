from .image import ProgramImage, ImageSegment
from .format import FileType, resolve_file_type, select_entry_point
from .formats import *
