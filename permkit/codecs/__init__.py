from permkit.codecs.flag_codec import set_flag, get_flag
from permkit.codecs.numeric_codec import decode_chmod, encode_chmod, decode_umask, encode_umask
from permkit.codecs.symbolic_codec import apply_symbolic, parse_symbolic
from permkit.codecs.extended_codec import decode_extended, encode_extended

__all__ = ('set_flag', 'get_flag',
           'decode_chmod', 'encode_chmod', 'decode_umask', 'encode_umask',
           'apply_symbolic', 'parse_symbolic',
           'decode_extended', 'encode_extended')
