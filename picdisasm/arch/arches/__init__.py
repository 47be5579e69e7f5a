from .baseline import BASELINE_ISA, ARCH_BASELINE
from .midrange import MIDRANGE_ISA, ARCH_MIDRANGE
from .enhanced import ENHANCED_ISA, ARCH_ENHANCED
