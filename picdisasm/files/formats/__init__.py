from .ihex import IHEXFormat, FORMAT_IHEX
from .srec import SRecordFormat, FORMAT_SREC
