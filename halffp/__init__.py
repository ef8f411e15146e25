from . import config
from .bits import utils, layout, ops, codec, classify
from .arithmetic import gmpmath, special, fmt, half, mathlib, constants

Half = half.Half
BitLayout = layout.BitLayout
BINARY16 = layout.BINARY16
BINARY32 = layout.BINARY32

narrow = codec.narrow
widen = codec.widen

HalfError = utils.HalfError
ParseError = utils.ParseError
