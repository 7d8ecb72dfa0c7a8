"""I/O modules for the DFPWM codec."""

from .pcm_reader import read_pcm, read_dfpwm
from .pcm_writer import write_pcm, write_dfpwm
from .bitstream import pack_bits, unpack_bits, packed_length

__all__ = [
    'read_pcm',
    'read_dfpwm',
    'write_pcm',
    'write_dfpwm',
    'pack_bits',
    'unpack_bits',
    'packed_length',
]
